"""Package Express reference data: eligibility limits and pricing."""
