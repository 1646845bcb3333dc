"""
# Calendar time representations and the errors raised by the time project.

# [ Elements ]

# /CalendarRecord/
	# The typed form of the mapping exchanged with scripts.
# /NormalizedCalendarTime/
	# The strict, `struct tm` shaped record given to and received from the system.
# /keys/
	# Mapping of &CalendarRecord field names to script mapping keys.
"""
import math
from typing import Optional, Mapping

from ..context import tools

class Error(Exception):
	"""
	# Base class for time project errors.
	"""

class InvalidInstant(Error):
	"""
	# The system could not decompose the instant into calendar fields.
	"""

	def __init__(self, instant, utc=False):
		self.instant = instant
		self.utc = utc

	def __str__(self):
		return "no calendar representation for instant %r" % (self.instant,)

class MissingRequiredField(Error, KeyError):
	"""
	# A calendar mapping given for construction did not have a usable
	# value for a required field.
	"""

	def __init__(self, field):
		super().__init__(field)
		self.field = field

	def __str__(self):
		return "field '%s' missing in date table" % (self.field,)

class UnrepresentableTime(Error, OverflowError):
	"""
	# The system could not express the, possibly overflowed, calendar fields as an instant.
	"""

	def __init__(self, struct):
		self.struct = struct

	def __str__(self):
		return "calendar time cannot be represented: %r" % (self.struct,)

keys = {
	'second': 'sec',
	'minute': 'min',
	'hour': 'hour',
	'day': 'day',
	'month': 'month',
	'year': 'year',
	'weekday': 'wday',
	'yearday': 'yday',
	'isdst': 'isdst',
}

def integer(value, isinstance=isinstance, int=int, float=float) -> Optional[int]:
	"""
	# Interpret &value as a script number truncated toward zero.

	# Integers, finite floats, and strings holding a number are accepted;
	# &None is returned for anything else, including &bool.

	# Strings may hold a decimal integer, a float, or a hexadecimal integer
	# with a `0x` prefix. Digit separators and non-ASCII digits are rejected.
	"""
	if isinstance(value, bool):
		return None
	if isinstance(value, int):
		return value

	if isinstance(value, str):
		value = value.strip()
		if not value.isascii() or '_' in value:
			return None

		base = 16 if value.lstrip('+-')[:2].lower() == '0x' else 10
		try:
			return int(value, base)
		except ValueError:
			pass
		try:
			value = float(value)
		except ValueError:
			return None

	if isinstance(value, float):
		if not math.isfinite(value):
			return None
		return int(value)

	return None

def flag(value) -> Optional[bool]:
	"""
	# Interpret &value as a tri-state flag. &None is unknown.
	"""
	if value is None:
		return None
	return bool(value)

@tools.record
class CalendarRecord(object):
	"""
	# Calendar fields as exchanged with scripts.

	# Months, weekdays, and days of the year are one-based; the week starts on
	# Sunday. Years are absolute. Any field may be &None; &isdst is &None when
	# the daylight saving state is unknown.
	"""
	second: Optional[int] = None
	minute: Optional[int] = None
	hour: Optional[int] = None
	day: Optional[int] = None
	month: Optional[int] = None
	year: Optional[int] = None
	weekday: Optional[int] = None
	yearday: Optional[int] = None
	isdst: Optional[bool] = None

	@classmethod
	def from_mapping(Class, mapping:Mapping) -> 'CalendarRecord':
		"""
		# Construct an instance from a script mapping using the &keys.
		# Values that are not numbers are treated as absent.
		"""
		get = mapping.get
		fields = {
			name: integer(get(key))
			for name, key in keys.items()
			if name != 'isdst'
		}
		return Class(isdst=flag(get('isdst')), **fields)

	def mapping(self) -> dict:
		"""
		# The script mapping of the record. Absent fields are not included.
		"""
		return {
			key: getattr(self, name)
			for name, key in keys.items()
			if getattr(self, name) is not None
		}

@tools.record
class NormalizedCalendarTime(object):
	"""
	# Calendar fields with the conventions of the system's `struct tm`.

	# [ Properties ]
	# /tm_mon/
		# Zero-based month.
	# /tm_year/
		# Years since 1900.
	# /tm_wday/
		# Days since Sunday.
	# /tm_yday/
		# Zero-based day of the year.
	# /tm_isdst/
		# Positive when daylight saving time is in effect, zero when not,
		# and negative when unknown.
	# /tm_zone/
		# Zone abbreviation, when reported by the system.
	# /tm_gmtoff/
		# Seconds east of UTC, when reported by the system.
	"""
	tm_sec: int
	tm_min: int
	tm_hour: int
	tm_mday: int
	tm_mon: int
	tm_year: int
	tm_wday: int = 0
	tm_yday: int = 0
	tm_isdst: int = -1
	tm_zone: Optional[str] = None
	tm_gmtoff: Optional[int] = None
