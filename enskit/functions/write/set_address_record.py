from enskit.functions.write._resolver import resolver_target
from enskit.utils.encoders import ETH_COIN_TYPE, encode_set_addr
from enskit.utils.normalise import namehash
from enskit.utils.web3_utils import resolve_chain_id, send_tx


def make_function_data(
  name: str,
  coin: int,
  value,
  resolver_address: str | None = None,
  chain_id: int | None = None,
) -> dict:
  return {
    'to': resolver_target(resolver_address, resolve_chain_id(chain_id)),
    'data': encode_set_addr(namehash(name), coin, value),
  }


def set_address_record(
  name: str,
  value,
  coin: int = ETH_COIN_TYPE,
  resolver_address: str | None = None,
  chain_id: int | None = None,
  gas: int | None = None,
) -> str:
  """
  Set an address record.

  Args:
    value: ETH address for coin 60, raw encoded bytes/hex for other
           coins. None or '' clears the record.

  Returns:
    Transaction hash
  """
  request = make_function_data(name, coin, value, resolver_address, chain_id)
  return send_tx(request, chain_id, gas=gas)


set_address_record.make_function_data = make_function_data
