"""
Registration helpers for the ETHRegistrarController.

Registration is a two step commit/reveal: commit(keccak256(abi.encode(...)))
first, then register(...) with the same parameters after the minimum
commitment age has passed.
"""
import os
from dataclasses import dataclass, field

from eth_abi import encode
from web3 import Web3

from enskit.contracts import EMPTY_ADDRESS
from enskit.errors import (
  CampaignReferenceTooLargeError,
  ResolverAddressRequiredError,
  UnsupportedNameTypeError,
)
from enskit.utils.normalise import get_name_type, labelhash, namehash, normalise
from enskit.utils.records import generate_record_call_array
from enskit.utils.wrapper import wrapped_label_length_check

# (labelhash, owner, duration, secret, resolver, data, reverseRecord, ownerControlledFuses)
COMMITMENT_TYPES = [
  'bytes32', 'address', 'uint256', 'bytes32', 'address', 'bytes[]', 'bool', 'uint16',
]


@dataclass
class RegistrationParameters:
  name: str
  owner: str
  duration: int
  secret: bytes
  resolver_address: str = EMPTY_ADDRESS
  records: dict = field(default_factory=dict)
  reverse_record: bool = False
  fuses: int = 0


def _label(params: RegistrationParameters) -> str:
  name_type = get_name_type(params.name)
  if name_type != 'eth-2ld':
    raise UnsupportedNameTypeError(
      name_type,
      ['eth-2ld'],
      details='Only 2ld-eth name registration is supported',
    )
  label = normalise(params.name).split('.')[0]
  wrapped_label_length_check(label)
  return label


def _resolver_and_data(params: RegistrationParameters) -> tuple[str, list[bytes]]:
  resolver = params.resolver_address or EMPTY_ADDRESS
  data = [
    bytes.fromhex(call[2:])
    for call in generate_record_call_array(namehash(params.name), params.records)
  ]
  has_resolver = int(resolver, 16) != 0
  if data and not has_resolver:
    raise ResolverAddressRequiredError('Resolver address is required when data is supplied')
  if params.reverse_record and not has_resolver:
    raise ResolverAddressRequiredError('Resolver address is required when reverse record is set')
  return resolver, data


def make_commitment_tuple(params: RegistrationParameters) -> tuple:
  """The abi.encode argument tuple hashed into a commitment."""
  label = _label(params)
  resolver, data = _resolver_and_data(params)
  return (
    labelhash(label),
    params.owner,
    params.duration,
    params.secret,
    resolver,
    data,
    params.reverse_record,
    params.fuses,
  )


def make_commitment(params: RegistrationParameters) -> bytes:
  """keccak256(abi.encode(commitment tuple)), same as makeCommitment on-chain."""
  return bytes(Web3.keccak(encode(COMMITMENT_TYPES, list(make_commitment_tuple(params)))))


def make_registration_tuple(params: RegistrationParameters) -> tuple:
  """Arguments for register(...), which takes the plain label instead of its hash."""
  label = _label(params)
  resolver, data = _resolver_and_data(params)
  return (
    label,
    params.owner,
    params.duration,
    params.secret,
    resolver,
    data,
    params.reverse_record,
    params.fuses,
  )


def random_secret(platform_domain: str | None = None, campaign: int | None = None) -> bytes:
  """
  Generate a 32-byte commitment secret.

  With a platform domain the first 4 bytes carry labelhash(platform)[:4];
  with a campaign the next 4 bytes carry the campaign id, so registrations
  can be attributed later.
  """
  secret = bytearray(os.urandom(32))
  if platform_domain:
    secret[0:4] = labelhash(platform_domain)[:4]
  if campaign is not None:
    if not 0 <= campaign <= 0xffffffff:
      raise CampaignReferenceTooLargeError(campaign)
    secret[4:8] = campaign.to_bytes(4, 'big')
  return bytes(secret)
