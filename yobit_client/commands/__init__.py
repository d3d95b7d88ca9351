"""
CLI command implementations.
"""

from .account import (
    balance_command,
    cancel_command,
    coupon_create_command,
    coupon_redeem_command,
    deposit_address_command,
    history_command,
    order_command,
    orders_command,
    trade_command,
    withdraw_command,
)
from .market import depth_command, info_command, ticker_command, trades_command

__all__ = [
    "balance_command",
    "cancel_command",
    "coupon_create_command",
    "coupon_redeem_command",
    "deposit_address_command",
    "depth_command",
    "history_command",
    "info_command",
    "order_command",
    "orders_command",
    "ticker_command",
    "trade_command",
    "trades_command",
    "withdraw_command",
]
