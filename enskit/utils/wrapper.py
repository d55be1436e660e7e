"""NameWrapper expiry and label helpers."""
from datetime import datetime

from enskit.errors import WrappedLabelTooLargeError

MAX_EXPIRY = 2 ** 64 - 1


def expiry_to_int(expiry=None, default: int = 0) -> int:
  """
  Coerce an expiry to seconds since epoch.

  Accepts None (→ default), int, numeric str or datetime.
  """
  if not expiry:
    return default
  if isinstance(expiry, bool):
    raise TypeError('Expiry must be an int, str or datetime')
  if isinstance(expiry, int):
    return expiry
  if isinstance(expiry, str):
    if expiry.lower().startswith('0x'):
      return int(expiry, 16)
    return int(expiry)
  if isinstance(expiry, datetime):
    return int(expiry.timestamp())
  raise TypeError('Expiry must be an int, str or datetime')


def wrapped_label_length_check(label: str):
  byte_length = len(label.encode('utf-8'))
  if byte_length > 255:
    raise WrappedLabelTooLargeError(label, byte_length)
