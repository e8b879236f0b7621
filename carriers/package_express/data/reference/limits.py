"""
Package Express Eligibility Limits

Maximum weight and aggregate size a package may have to ship via
Package Express. Both limits are inclusive (a value equal to the limit passes).
"""

WEIGHT_LIMIT_LBS = 50         # Max actual weight
SIZE_LIMIT_IN = 50            # Max width + height + length

# Fields used in the shipment frame
WEIGHT_FIELD = "weight_lbs"   # Compare this field against WEIGHT_LIMIT_LBS
SIZE_FIELD = "total_size_in"  # Compare this field against SIZE_LIMIT_IN
DIMENSION_FIELDS = ("width_in", "height_in", "length_in")
