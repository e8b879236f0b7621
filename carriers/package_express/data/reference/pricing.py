"""
Package Express Pricing Configuration

Standard rate: width * height * length * weight, divided by COST_DIVISOR.
No fuel, discount or minimum charge applies.
"""

COST_DIVISOR = 100
