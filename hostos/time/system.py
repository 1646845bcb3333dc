"""
# Access to the system's calendar and clock primitives.

# The functions here are thin adapters over &time that translate between
# &types.NormalizedCalendarTime and the tuples used by the standard library.
# Decomposition and construction failures are reported as &None, in the manner
# of the C functions returning `NULL` or `-1`; callers decide whether that is
# an error.
"""
import math
import time

from . import types

epoch_year = 1900

def _normalized(st:time.struct_time, Type=types.NormalizedCalendarTime) -> types.NormalizedCalendarTime:
	# struct_time weeks start on Monday and its year days are one-based.
	return Type(
		st.tm_sec, st.tm_min, st.tm_hour, st.tm_mday,
		st.tm_mon - 1,
		st.tm_year - epoch_year,
		(st.tm_wday + 1) % 7,
		st.tm_yday - 1,
		st.tm_isdst,
		getattr(st, 'tm_zone', None),
		getattr(st, 'tm_gmtoff', None),
	)

def struct(ntm:types.NormalizedCalendarTime, struct_time=time.struct_time) -> time.struct_time:
	"""
	# Convert &ntm into the &time.struct_time expected by the standard library.
	"""
	return struct_time((
		ntm.tm_year + epoch_year,
		ntm.tm_mon + 1,
		ntm.tm_mday,
		ntm.tm_hour,
		ntm.tm_min,
		ntm.tm_sec,
		(ntm.tm_wday + 6) % 7,
		ntm.tm_yday + 1,
		ntm.tm_isdst,
		ntm.tm_zone,
		ntm.tm_gmtoff,
	))

def localtime(instant:int, convert=time.localtime):
	"""
	# Decompose &instant with the local time zone rules.
	# Returns &None when the instant has no calendar representation.
	"""
	try:
		return _normalized(convert(instant))
	except (OverflowError, OSError, ValueError):
		return None

def gmtime(instant:int, convert=time.gmtime):
	"""
	# Decompose &instant as UTC.
	# Returns &None when the instant has no calendar representation.
	"""
	try:
		return _normalized(convert(instant))
	except (OverflowError, OSError, ValueError):
		return None

def mktime(ntm:types.NormalizedCalendarTime, construct=time.mktime):
	"""
	# Normalize the local calendar time &ntm into an instant.

	# Out of range fields are carried into the larger units by the system.
	# Returns &None when the result is not representable.
	"""
	fields = (
		ntm.tm_year + epoch_year,
		ntm.tm_mon + 1,
		ntm.tm_mday,
		ntm.tm_hour,
		ntm.tm_min,
		ntm.tm_sec,
		0, 1, # Weekday and year day are ignored by the system.
		ntm.tm_isdst,
	)

	try:
		return int(construct(fields))
	except (OverflowError, OSError, ValueError):
		return None

def strftime(pattern:str, ntm:types.NormalizedCalendarTime, capacity:int, render=time.strftime) -> str:
	"""
	# Render &ntm using &pattern into at most &capacity characters.

	# Like the C function, an empty string is returned when the output does not
	# fit; it is also returned when the system rejects the pattern.
	"""
	try:
		text = render(pattern, struct(ntm))
	except ValueError:
		return ''

	if len(text) > capacity:
		return ''
	return text

def clock(read=time.process_time_ns):
	"""
	# Sample the process' CPU clock. Returns the ticks and the ticks per second.
	"""
	return (read(), 1000000000)

def difftime(t1:int, t0:int) -> float:
	"""
	# Seconds elapsed from &t0 to &t1.
	"""
	try:
		return float(t1 - t0)
	except OverflowError:
		# Differences beyond the float range.
		return math.inf if t1 > t0 else -math.inf

def now(read=time.time) -> int:
	"""
	# The current instant in whole seconds.
	"""
	return int(read())
