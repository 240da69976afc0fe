# Test Utility Constants

# Principal addresses
HOST_ADDRESS = '0x1111111111111111111111111111111111111111'
ANOTHER_HOST_ADDRESS = '0x2222222222222222222222222222222222222222'
BUYER_ADDRESS = '0x3333333333333333333333333333333333333333'
ANOTHER_BUYER_ADDRESS = '0x4444444444444444444444444444444444444444'
OPERATOR_ADDRESS = '0x5555555555555555555555555555555555555555'
STRANGER_ADDRESS = '0x6666666666666666666666666666666666666666'

# Event defaults
DEFAULT_EVENT_TITLE = 'Rooftop Jazz Night'
DEFAULT_PRICE_IN_WEI = 100
DEFAULT_TOTAL_TICKETS = 2
DEFAULT_DAYS_AHEAD = 30
