"""
Write several resolver records in one transaction.

A single record is sent as a plain call; more go through the resolver's
multicall(bytes[]).
"""
from enskit.functions.write._resolver import resolver_target
from enskit.utils.encoders import encode_multicall
from enskit.utils.normalise import namehash
from enskit.utils.records import generate_record_call_array
from enskit.utils.web3_utils import resolve_chain_id, send_tx


def make_function_data(
  name: str,
  records: dict,
  resolver_address: str | None = None,
  chain_id: int | None = None,
) -> dict:
  calls = generate_record_call_array(namehash(name), records)
  if not calls:
    raise ValueError('No records to set')
  return {
    'to': resolver_target(resolver_address, resolve_chain_id(chain_id)),
    'data': calls[0] if len(calls) == 1 else encode_multicall(calls),
  }


def set_records(
  name: str,
  records: dict,
  resolver_address: str | None = None,
  chain_id: int | None = None,
  gas: int | None = None,
) -> str:
  """
  Set records on a resolver.

  `records` takes the keys accepted by generate_record_call_array
  (clear_records, content_hash, abi, texts, coins).

  Returns:
    Transaction hash
  """
  request = make_function_data(name, records, resolver_address, chain_id)
  return send_tx(request, chain_id, gas=gas)


set_records.make_function_data = make_function_data
