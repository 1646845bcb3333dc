"""
# Conversion between calendar records and the system's calendar time.

# Decomposition turns an instant into a &types.CalendarRecord; composition
# validates a record, or a script mapping, and applies the field defaults
# producing the &types.NormalizedCalendarTime handed to the system for
# normalization by &construct.
"""
import logging
from collections.abc import Mapping

from . import types
from . import system

log = logging.getLogger(__name__)

# Values used for absent construction fields.
defaults = {
	'second': 0,
	'minute': 0,
	'hour': 12,
}

# Fields that must be present for construction.
required = ('day', 'month', 'year')

epoch_year = system.epoch_year

def structure(instant:int, utc:bool=False,
		localtime=system.localtime,
		gmtime=system.gmtime,
	) -> types.NormalizedCalendarTime:
	"""
	# Decompose &instant into the system's calendar structure.

	# [ Parameters ]
	# /instant/
		# Seconds since the epoch.
	# /utc/
		# Whether to decompose as UTC instead of local time.

	# [ Exceptions ]
	# /&types.InvalidInstant/
		# The system had no calendar representation for &instant.
	"""
	ntm = (gmtime if utc else localtime)(instant)
	if ntm is None:
		raise types.InvalidInstant(instant, utc)
	return ntm

def record(ntm:types.NormalizedCalendarTime, Type=types.CalendarRecord) -> types.CalendarRecord:
	"""
	# Convert the system structure &ntm into a &types.CalendarRecord.
	"""
	return Type(
		second = ntm.tm_sec,
		minute = ntm.tm_min,
		hour = ntm.tm_hour,
		day = ntm.tm_mday,
		month = ntm.tm_mon + 1,
		year = ntm.tm_year + epoch_year,
		weekday = ntm.tm_wday + 1,
		yearday = ntm.tm_yday + 1,
		isdst = None if ntm.tm_isdst < 0 else bool(ntm.tm_isdst),
	)

def decompose(instant:int, utc:bool=False) -> types.CalendarRecord:
	"""
	# Decompose &instant into a &types.CalendarRecord.
	# Raises &types.InvalidInstant when the system cannot represent the instant.
	"""
	return record(structure(instant, utc))

def compose(source, defaults=defaults, required=required) -> types.NormalizedCalendarTime:
	"""
	# Build the strict system structure from a &types.CalendarRecord or a script mapping.

	# Absent fields are filled from &defaults and the daylight saving state
	# defaults to unknown. The weekday and year day are not consulted.
	# No normalization is performed here; see &construct.

	# [ Exceptions ]
	# /&types.MissingRequiredField/
		# One of the &required fields was absent.
	"""
	if isinstance(source, Mapping):
		source = types.CalendarRecord.from_mapping(source)

	fields = {}
	for name in ('second', 'minute', 'hour', 'day', 'month', 'year'):
		value = getattr(source, name)
		if value is None:
			if name in required:
				raise types.MissingRequiredField(name)
			value = defaults[name]
		fields[name] = value

	if source.isdst is None:
		isdst = -1
	else:
		isdst = int(source.isdst)

	return types.NormalizedCalendarTime(
		tm_sec = fields['second'],
		tm_min = fields['minute'],
		tm_hour = fields['hour'],
		tm_mday = fields['day'],
		tm_mon = fields['month'] - 1,
		tm_year = fields['year'] - epoch_year,
		tm_isdst = isdst,
	)

def construct(source, mktime=system.mktime) -> int:
	"""
	# Compose &source and normalize it into an instant using the local time zone.

	# [ Exceptions ]
	# /&types.MissingRequiredField/
		# Raised by &compose.
	# /&types.UnrepresentableTime/
		# The system could not express the composed fields as an instant.
	"""
	ntm = compose(source)
	t = mktime(ntm)
	if t is None:
		log.debug("calendar time not representable: %r", ntm)
		raise types.UnrepresentableTime(ntm)
	return t
