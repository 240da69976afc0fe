from typing import Any


ZERO_ADDRESS = '0x' + '0' * 40


def is_zero_address(address: Any) -> bool:
    return not address or address == ZERO_ADDRESS
