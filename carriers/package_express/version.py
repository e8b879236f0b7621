"""Package Express calculator version, stamped on every calculated shipment frame."""

VERSION = "2024.3.0"
