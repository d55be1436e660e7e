from enskit.functions.write._resolver import resolver_target
from enskit.utils.encoders import encode_set_text
from enskit.utils.normalise import namehash
from enskit.utils.web3_utils import resolve_chain_id, send_tx


def make_function_data(
  name: str,
  key: str,
  value: str | None,
  resolver_address: str | None = None,
  chain_id: int | None = None,
) -> dict:
  return {
    'to': resolver_target(resolver_address, resolve_chain_id(chain_id)),
    'data': encode_set_text(namehash(name), key, value),
  }


def set_text_record(
  name: str,
  key: str,
  value: str | None,
  resolver_address: str | None = None,
  chain_id: int | None = None,
  gas: int | None = None,
) -> str:
  """Set a text record; None clears it. Returns the tx hash."""
  request = make_function_data(name, key, value, resolver_address, chain_id)
  return send_tx(request, chain_id, gas=gas)


set_text_record.make_function_data = make_function_data
