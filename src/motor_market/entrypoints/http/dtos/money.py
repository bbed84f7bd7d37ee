# Non-negative decimal string with at most two places; floats never cross the boundary
MONEY_PATTERN = r"^\d+(\.\d{1,2})?$"
