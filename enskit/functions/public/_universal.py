"""
UniversalResolver plumbing shared by the record readers.

Record reads go through resolve(bytes name, bytes data): the inner
resolver calldata is wrapped, and the (data, resolver) result unwrapped.
"""
import logging

from enskit.contracts import UNIVERSAL_RESOLVER_ABI, get_chain_contract_address
from enskit.errors import CallReverted, UniversalResolverError
from enskit.utils.abi import decode_error_result, decode_function_result, encode_function_data, to_bytes
from enskit.utils.normalise import dns_encode, normalise
from enskit.utils.web3_utils import call, resolve_chain_id

logger = logging.getLogger('enskit')

# Reverts meaning "nothing to resolve" rather than a failure
SOFT_ERRORS = {
  'ResolverNotFound',
  'ResolverWildcardNotSupported',
  'ResolverNotContract',
}


def encode_resolve(name: str, data, chain_id: int | None = None) -> dict:
  """Wrap resolver calldata in UniversalResolver.resolve(bytes,bytes)."""
  return {
    'to': get_chain_contract_address(resolve_chain_id(chain_id), 'ens_universal_resolver'),
    'data': encode_function_data(
      UNIVERSAL_RESOLVER_ABI,
      'resolve(bytes,bytes)',
      [dns_encode(normalise(name)), to_bytes(data)],
    ),
  }


def decode_resolve(data) -> tuple[bytes, str] | None:
  """Unwrap (data, resolver). Empty return data → None."""
  raw = to_bytes(data)
  if not raw:
    return None
  result, resolver = decode_function_result(UNIVERSAL_RESOLVER_ABI, 'resolve(bytes,bytes)', raw)
  return result, resolver


def handle_revert(error: CallReverted, name: str) -> None:
  """
  Map a UniversalResolver revert.

  Soft errors are logged and swallowed (caller returns None); anything
  else raises UniversalResolverError, or re-raises the original revert
  when the payload is not a known error.
  """
  decoded = decode_error_result(UNIVERSAL_RESOLVER_ABI, error.data)
  if decoded is None:
    raise error
  error_name, args = decoded
  if error_name in SOFT_ERRORS:
    logger.warning(f'UniversalResolver {error_name} for {name}')
    return None
  raise UniversalResolverError(error_name, args) from error


def universal_call(request: dict, name: str, chain_id: int | None = None) -> bytes | None:
  """Run a UniversalResolver request; None when the name cannot be resolved."""
  try:
    return call(request, chain_id)
  except CallReverted as e:
    return handle_revert(e, name)
