# No dependencies
HUE_360 = 360.0

PERCENT_SCALE = 100.0
MAX_8BIT = 255
MAX_NIBBLE = 15
