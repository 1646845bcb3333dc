"""
# Primary public module.

# Provides the functions registered with a script engine's `os` table:
# &date, &time, &difftime, and &clock. Failures that scripts are expected to
# check for are returned as &None; construction requests missing a required
# field raise &types.MissingRequiredField.
"""
import math
import logging
import numbers
from collections.abc import Mapping

from . import types
from . import system
from . import calendar
from . import format as timeformat
from . import clock as elapsed

__shortname__ = 'libtime'

log = logging.getLogger(__name__)

def _number(value, name, isinstance=isinstance):
	if isinstance(value, bool) or not isinstance(value, numbers.Real):
		raise TypeError("%s must be a number, not %s" % (name, type(value).__name__))
	return value

def _instant(value, name) -> int:
	# Script numbers are truncated to whole seconds.
	value = _number(value, name)
	try:
		finite = math.isfinite(value)
	except OverflowError:
		# Integers beyond the float range.
		finite = False
	if not finite:
		raise types.InvalidInstant(value)
	return int(value)

def date(pattern:str=timeformat.default_pattern, instant=None):
	"""
	# Format the calendar time of &instant with &pattern.

	# [ Parameters ]
	# /pattern/
		# A `strftime` pattern, optionally prefixed with `!` for UTC.
		# `*t` requests the calendar mapping.
	# /instant/
		# Seconds since the epoch; the current time when &None.

	# [ Returns ]
	# The formatted text, the calendar mapping for `*t`, or &None when
	# the instant has no calendar representation.
	"""
	if not isinstance(pattern, str):
		raise TypeError("pattern must be a string, not %s" % (type(pattern).__name__,))

	try:
		t = system.now() if instant is None else _instant(instant, 'instant')
		r = timeformat.format(t, pattern)
	except types.InvalidInstant as err:
		log.debug("date: %s", err)
		return None

	if isinstance(r, types.CalendarRecord):
		return r.mapping()
	return r

def time(record:Mapping=None):
	"""
	# The instant identified by the calendar mapping &record, or the current
	# instant when &record is &None.

	# Absent `sec` and `min` default to zero, `hour` to twelve, and `isdst` to unknown.
	# Returns &None when the system cannot represent the normalized fields.
	"""
	if record is None:
		return system.now()
	if not isinstance(record, Mapping):
		raise TypeError("record must be a mapping, not %s" % (type(record).__name__,))

	try:
		return calendar.construct(record)
	except types.UnrepresentableTime:
		return None

def difftime(later, earlier=0) -> float:
	"""
	# Seconds from &earlier to &later.
	"""
	return elapsed.difference(_number(later, 'later'), _number(earlier, 'earlier'))

def clock() -> float:
	"""
	# Seconds of CPU time used by the process.
	"""
	return elapsed.cpu()

# Names registered by script hosts.
functions = {
	'clock': clock,
	'date': date,
	'difftime': difftime,
	'time': time,
}
