"""
# Render calendar time as text using the system's `strftime` patterns.

# The system primitive writes into a bounded buffer and reports zero when the
# output did not fit. &render estimates the needed capacity from the pattern
# and grows it a limited number of times with &grow.

# ! NOTE:
	# A zero length result is ambiguous: the buffer may have been too small or
	# the pattern may legitimately produce no text. Both cases are retried, and
	# an exhausted retry yields an empty string rather than an error.
"""
import logging

from . import types
from . import system
from . import calendar

log = logging.getLogger(__name__)

default_pattern = '%c'
specifier_weight = 30 # Capacity estimated for each conversion specifier.
attempts = 4 # Renders tried before giving up.

# Pattern returning a &types.CalendarRecord instead of text.
record_pattern = '*t'
# Leading character selecting UTC decomposition.
utc_prefix = '!'

def estimate(pattern:str, weight:int=specifier_weight) -> int:
	"""
	# Initial capacity for rendering &pattern.

	# Ordinary characters count as one and `%` as &weight. The estimate is a
	# starting point; it is neither a lower nor an upper bound of the output.
	"""
	return sum(weight if c == '%' else 1 for c in pattern)

def grow(size:int) -> int:
	"""
	# The capacity following &size. Roughly doubles, and always grows from zero.
	"""
	return size + (size | 1)

def render(pattern:str, ntm:types.NormalizedCalendarTime,
		capacity:int=None,
		attempts:int=attempts,
		strftime=system.strftime,
	) -> str:
	"""
	# Render &ntm with &pattern, growing the capacity until the system
	# produces output or the &attempts are exhausted.

	# [ Parameters ]
	# /pattern/
		# The `strftime` pattern; no sentinel processing is performed.
	# /ntm/
		# The decomposed calendar time.
	# /capacity/
		# The initial capacity. Defaults to the &estimate of &pattern.
	# /attempts/
		# The maximum number of calls to &strftime.
	# /strftime/
		# The rendering primitive.

	# [ Returns ]
	# The rendered text, or an empty string when no attempt produced output.
	"""
	if capacity is None:
		capacity = estimate(pattern)

	for i in range(attempts):
		text = strftime(pattern, ntm, capacity)
		if text:
			return text
		capacity = grow(capacity)

	log.debug("no output from %r after %d attempts", pattern, attempts)
	return ''

def format(instant:int, pattern:str=default_pattern,
		structure=calendar.structure,
		strftime=system.strftime,
	):
	"""
	# Format the calendar time of &instant.

	# A leading `!` in &pattern selects UTC decomposition and is removed.
	# The remaining pattern `*t` returns the &types.CalendarRecord, and an
	# empty pattern returns an empty string without rendering.

	# [ Exceptions ]
	# /&types.InvalidInstant/
		# The instant could not be decomposed; raised for every pattern.
	"""
	utc = pattern.startswith(utc_prefix)
	if utc:
		pattern = pattern[len(utc_prefix):]

	ntm = structure(instant, utc)

	if pattern == record_pattern:
		return calendar.record(ntm)
	elif pattern:
		return render(pattern, ntm, strftime=strftime)
	else:
		return ''
