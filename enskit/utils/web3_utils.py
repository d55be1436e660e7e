"""
Web3 transport for enskit.

- Provider lookup per chain (get_w3)
- Raw eth_call returning bytes, with reverts surfaced as CallReverted
- Transaction signing and sending from the configured wallet (send_tx)

Everything above this module deals in {'to': ..., 'data': ...} requests
and raw bytes, so it can be tested without a node.
"""
import logging

from eth_account import Account
from web3 import Web3
from web3.exceptions import ContractLogicError

from enskit.config import settings
from enskit.contracts import CHAIN_IDS
from enskit.errors import CallReverted, ConfigurationError, UnsupportedChainError
from enskit.utils.abi import to_bytes

logger = logging.getLogger('enskit')


# ─────────────────────────────────────────────────────────────────────────────
# RPC URL settings key by chain ID
# ─────────────────────────────────────────────────────────────────────────────

CHAIN_RPC_SETTINGS = {
  1:        'MAINNET_RPC_URL',
  11155111: 'SEPOLIA_RPC_URL',
  17000:    'HOLESKY_RPC_URL',
}


def resolve_chain_id(chain_id: int | None) -> int:
  """Fall back to ENS_CHAIN_ID when no chain is given."""
  if chain_id is None:
    return getattr(settings, 'ENS_CHAIN_ID', 1)
  return chain_id


# ─────────────────────────────────────────────────────────────────────────────
# Web3 provider helpers
# ─────────────────────────────────────────────────────────────────────────────

def get_w3(chain_id: int | None = None):
  """Get a Web3 instance connected to the given chain."""
  chain_id = resolve_chain_id(chain_id)

  rpc_url = getattr(settings, 'ENS_RPC_URL', '')
  if not rpc_url:
    rpc_setting = CHAIN_RPC_SETTINGS.get(chain_id)
    if not rpc_setting:
      raise UnsupportedChainError(chain_id, CHAIN_IDS)
    rpc_url = getattr(settings, rpc_setting, '')
    if not rpc_url:
      raise ConfigurationError(rpc_setting)

  return Web3(Web3.HTTPProvider(rpc_url))


def _revert_data(error: ContractLogicError) -> bytes:
  data = getattr(error, 'data', None)
  if isinstance(data, dict):
    data = data.get('data')
  if not data:
    return b''
  try:
    return to_bytes(data)
  except ValueError:
    # Plain revert reason strings are not hex
    return b''


def call(request: dict, chain_id: int | None = None) -> bytes:
  """
  Perform an eth_call for a {'to', 'data'} request.

  Returns:
    Raw return data

  Raises:
    CallReverted: the call reverted; `.data` carries the revert payload
  """
  w3 = get_w3(chain_id)
  logger.debug(f'call to={request["to"]} data={request["data"][:10]}')
  try:
    return bytes(w3.eth.call({'to': request['to'], 'data': request['data']}))
  except ContractLogicError as e:
    raise CallReverted(_revert_data(e), str(e)) from e


def send_tx(
  request: dict,
  chain_id: int | None = None,
  gas: int | None = None,
  value: int = 0,
) -> str:
  """
  Build, sign, and send a transaction from the configured wallet.

  Args:
    request: {'to': address, 'data': calldata}
    chain_id: Chain ID (default ENS_CHAIN_ID)
    gas: Gas limit (default ENS_GAS_LIMIT)
    value: Wei to attach (registration and renewal fees)

  Returns:
    Transaction hash (hex string, 0x-prefixed)
  """
  private_key = getattr(settings, 'ENS_PRIVATE_KEY', '')
  if not private_key:
    raise ConfigurationError('ENS_PRIVATE_KEY')

  chain_id = resolve_chain_id(chain_id)
  w3 = get_w3(chain_id)
  account = Account.from_key(private_key)

  tx = {
    'from': account.address,
    'to': request['to'],
    'data': request['data'],
    'value': value,
    'nonce': w3.eth.get_transaction_count(account.address),
    'gas': gas or getattr(settings, 'ENS_GAS_LIMIT', 300_000),
    'gasPrice': w3.eth.gas_price,
    'chainId': chain_id,
  }

  signed_tx = w3.eth.account.sign_transaction(tx, private_key)
  tx_hash = w3.eth.send_raw_transaction(signed_tx.raw_transaction)

  logger.info(f'send_tx(to={request["to"]} selector={request["data"][:10]}) '
              f'tx={Web3.to_hex(tx_hash)} chain={chain_id}')
  return Web3.to_hex(tx_hash)
