"""
ENS name utilities.

Handles normalisation (ENSIP-15 via web3's ens package), namehash and
labelhash computation, DNS wire-format names, and name classification.
"""
import re

from ens.utils import normalize_name
from web3 import Web3

from enskit.errors import InvalidEncodedLabelError

EMPTY_NODE = b'\x00' * 32

_ENCODED_LABEL = re.compile(r'^\[[0-9a-fA-F]{64}\]$')


def is_encoded_label(label: str) -> bool:
  """True for labels of the form '[<64 hex chars>]'."""
  return bool(_ENCODED_LABEL.match(label))


def _check_bracketed(label: str):
  if label.startswith('[') and label.endswith(']') and not is_encoded_label(label):
    raise InvalidEncodedLabelError(label)


def encode_label(labelhash: bytes) -> str:
  return f'[{labelhash.hex()}]'


def normalise(name: str) -> str:
  """
  Normalise a name per ENSIP-15.

  Encoded labels ('[<hash>]') are kept as-is (lowercased), since they stand
  for a label whose text is unknown.
  """
  if not name:
    return name

  labels = name.split('.')
  for label in labels:
    _check_bracketed(label)

  if not any(is_encoded_label(label) for label in labels):
    return normalize_name(name)

  return '.'.join(
    label.lower() if is_encoded_label(label) else normalize_name(label)
    for label in labels
  )


def labelhash(label: str) -> bytes:
  """keccak256 of a single label, or the literal hash of an encoded label."""
  _check_bracketed(label)
  if is_encoded_label(label):
    return bytes.fromhex(label[1:-1])
  return bytes(Web3.keccak(text=label))


def namehash(name: str) -> bytes:
  """
  Compute the ENS namehash for a dotted name.

  namehash("") = 0x0000...0000
  namehash("eth") = keccak256(namehash("") + keccak256("eth"))
  namehash("alice.eth") = keccak256(namehash("eth") + keccak256("alice"))

  Args:
    name: Dotted ENS name (normalised before hashing)

  Returns:
    32-byte namehash
  """
  node = EMPTY_NODE
  if not name:
    return node
  labels = normalise(name).split('.')
  for label in reversed(labels):
    node = bytes(Web3.keccak(node + labelhash(label)))
  return node


def dns_encode(name: str) -> bytes:
  """
  Encode a dotted name in DNS wire format.

  Each label is prefixed with its length byte, terminated by 0x00. Labels
  longer than 255 bytes are replaced by their encoded labelhash.

  Example: 'alice.eth' → b'\\x05alice\\x03eth\\x00'
  """
  if not name:
    return b'\x00'

  encoded = b''
  for label in name.split('.'):
    if not label:
      raise ValueError(f'Empty label in name: {name!r}')
    label_bytes = label.encode('utf-8')
    if len(label_bytes) > 255:
      label_bytes = encode_label(labelhash(label)).encode('utf-8')
    encoded += bytes([len(label_bytes)]) + label_bytes
  return encoded + b'\x00'


def dns_decode(dns_name: bytes) -> str:
  """
  Decode a DNS-encoded name into a human-readable dotted string.

  Example: b'\\x05alice\\x03eth\\x00' → 'alice.eth'
  """
  labels = []
  i = 0
  while i < len(dns_name):
    length = dns_name[i]
    if length == 0:
      break
    i += 1
    labels.append(dns_name[i:i + length].decode('utf-8'))
    i += length
  return '.'.join(labels)


def make_label_node_and_parent(name: str) -> tuple[str, bytes, bytes]:
  """
  Split a name into its first label and parent.

  Example: 'sub.alice.eth' → ('sub', labelhash('sub'), namehash('alice.eth'))

  Returns:
    (label, labelhash, parent_node)
  """
  labels = normalise(name).split('.')
  label = labels[0]
  return label, labelhash(label), namehash('.'.join(labels[1:]))


def get_name_type(name: str) -> str:
  """
  Classify a name by depth and TLD.

  Returns one of: 'root', 'eth-tld', 'tld', 'eth-2ld', 'other-2ld',
  'eth-subname', 'other-subname'.
  """
  if not name:
    return 'root'

  labels = name.split('.')
  is_dot_eth = labels[-1] == 'eth'

  if len(labels) == 1:
    return 'eth-tld' if is_dot_eth else 'tld'
  if len(labels) == 2:
    return 'eth-2ld' if is_dot_eth else 'other-2ld'
  return 'eth-subname' if is_dot_eth else 'other-subname'
