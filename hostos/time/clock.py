"""
# Elapsed time measurement.
"""
from . import system

def _seconds(value, int=int, float=float):
	# Whole seconds; non-finite numbers are kept as floats.
	try:
		return int(value)
	except (ValueError, OverflowError):
		return float(value)

def cpu(clock=system.clock) -> float:
	"""
	# CPU time used by the process, in seconds, since an unspecified start point.
	"""
	ticks, frequency = clock()
	return ticks * (1.0 / frequency)

def difference(later, earlier=0, difftime=system.difftime) -> float:
	"""
	# The seconds from &earlier to &later. Reversed arguments give negative results.

	# Both instants are truncated to whole seconds first. Infinite and NaN
	# instants are not errors; they produce infinite or NaN differences.
	"""
	return difftime(_seconds(later), _seconds(earlier))
