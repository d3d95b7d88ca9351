"""
Account commands - signed calls to the private API.

Each command takes a YobitClient, performs one call and reports the result.
The exchange signals failures with `"success": 0` and an `error` message;
commands return False in that case so the CLI can exit non-zero.
"""

from typing import Any

from ..core.api_client import YobitClient
from ..utilities.console import (
    build_funds_table,
    confirm_action,
    console,
    print_error,
    print_info,
    print_json,
    print_success,
    print_warning,
)
from ..utilities.formatters import format_timestamp


def report_response(response: Any) -> bool:
    """Print the `return` payload of a successful response, or its error."""
    if isinstance(response, dict) and response.get("success") == 1:
        print_json(response.get("return", {}))
        return True

    error = response.get("error") if isinstance(response, dict) else None
    print_error(f"Request rejected by exchange: {error or response}")
    return False


async def balance_command(client: YobitClient) -> bool:
    """Show balances and API key rights"""
    response = await client.get_info()
    if not isinstance(response, dict) or response.get("success") != 1:
        return report_response(response)

    payload = response.get("return", {})
    console.print(build_funds_table(payload.get("funds", {}), title="Available funds"))
    console.print(
        build_funds_table(payload.get("funds_incl_orders", {}), title="Funds including orders")
    )
    rights = payload.get("rights", {})
    granted = [name for name, enabled in rights.items() if enabled]
    console.print(f"Key rights: {', '.join(granted) if granted else 'none'}")
    print_info(f"Server time: {format_timestamp(payload.get('server_time'))}")
    return True


async def orders_command(client: YobitClient, pair: str) -> bool:
    """List active orders for a pair"""
    response = await client.active_orders(pair)
    if isinstance(response, dict) and response.get("success") == 1 and not response.get("return"):
        print(f"No active orders found for {pair}")
        return True
    return report_response(response)


async def order_command(client: YobitClient, order_id: int) -> bool:
    """Show one order"""
    return report_response(await client.order_info(order_id))


async def cancel_command(client: YobitClient, order_id: int) -> bool:
    """Cancel one order"""
    print(f"🗑️  Cancelling order {order_id}...")
    success = report_response(await client.cancel_order(order_id))
    if success:
        print_success(f"Successfully cancelled order {order_id}")
    return success


async def trade_command(
    client: YobitClient, pair: str, side: str, rate: str, amount: str
) -> bool:
    """Place a limit order"""
    print(f"Placing {side.upper()} order: {amount} {pair} @ {rate}")
    return report_response(await client.trade(pair, side, rate, amount))


async def history_command(client: YobitClient, **filters: Any) -> bool:
    """Show own trade history"""
    return report_response(await client.trade_history(**filters))


async def deposit_address_command(client: YobitClient, coin: str, new: bool = False) -> bool:
    """Show deposit address for a coin"""
    return report_response(await client.get_deposit_address(coin, need_new=int(new)))


async def withdraw_command(
    client: YobitClient, coin: str, amount: str, address: str, yes: bool = False
) -> bool:
    """Withdraw coins to an external address"""
    if not yes:
        print_warning(f"About to withdraw {amount} {coin.upper()} to {address}")
        if not confirm_action("Proceed with withdrawal?"):
            print("Withdrawal cancelled")
            return False

    return report_response(await client.withdraw_coins_to_address(coin, amount, address))


async def coupon_create_command(client: YobitClient, currency: str, amount: str) -> bool:
    """Create a Yobicode"""
    return report_response(await client.create_yobicode(currency, amount))


async def coupon_redeem_command(client: YobitClient, code: str) -> bool:
    """Redeem a Yobicode"""
    return report_response(await client.redeem_yobicode(code))
