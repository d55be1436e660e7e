"""
NameWrapper fuse bits.

Child-controlled fuses occupy the low 16 bits, parent-controlled fuses
the high 16 bits.
"""

CHILD_CONTROLLED_FUSES = {
  'cannot_unwrap':           1,
  'cannot_burn_fuses':       2,
  'cannot_transfer':         4,
  'cannot_set_resolver':     8,
  'cannot_set_ttl':          16,
  'cannot_create_subdomain': 32,
  'cannot_approve':          64,
}

PARENT_CONTROLLED_FUSES = {
  'parent_cannot_control': 1 << 16,
  'is_dot_eth':            1 << 17,
  'can_extend_expiry':     1 << 18,
}

FUSES = {**CHILD_CONTROLLED_FUSES, **PARENT_CONTROLLED_FUSES}

CANNOT_UNWRAP = FUSES['cannot_unwrap']
CANNOT_BURN_FUSES = FUSES['cannot_burn_fuses']
CANNOT_TRANSFER = FUSES['cannot_transfer']
CANNOT_SET_RESOLVER = FUSES['cannot_set_resolver']
CANNOT_SET_TTL = FUSES['cannot_set_ttl']
CANNOT_CREATE_SUBDOMAIN = FUSES['cannot_create_subdomain']
CANNOT_APPROVE = FUSES['cannot_approve']
PARENT_CANNOT_CONTROL = FUSES['parent_cannot_control']
IS_DOT_ETH = FUSES['is_dot_eth']
CAN_EXTEND_EXPIRY = FUSES['can_extend_expiry']

# Mask of every child bit, defined or not
CHILD_FUSE_MASK = 0xffff


def decode_fuses(value: int) -> dict:
  """
  Decode a fuse bitmap into named flags.

  Example: decode_fuses(1 | 4)['child'] →
    {'cannot_unwrap': True, 'cannot_transfer': True, ..., 'can_do_everything': False}
  """
  child = {name: bool(value & bit) for name, bit in CHILD_CONTROLLED_FUSES.items()}
  child['can_do_everything'] = (value & CHILD_FUSE_MASK) == 0
  parent = {name: bool(value & bit) for name, bit in PARENT_CONTROLLED_FUSES.items()}
  return {'child': child, 'parent': parent, 'value': value}


def encode_fuses(names) -> int:
  """OR together fuses given by name (e.g. ['cannot_unwrap', 'cannot_transfer'])."""
  value = 0
  for name in names:
    if name not in FUSES:
      raise ValueError(f'Unknown fuse: {name}. Available: {", ".join(FUSES.keys())}')
    value |= FUSES[name]
  return value
