"""
# Function tools used by local projects.
"""
import functools
import dataclasses

partial = functools.partial

def reflect(obj):
	"""
	# Callable that returns the single argument that it was given.
	"""
	return obj

# Create the dataclass constructor commonly used by hostos projects.
try:
	reflect(dataclasses.dataclass(slots=True))
except TypeError:
	# Pre-3.10
	record = struct = partial(dataclasses.dataclass, eq=True, frozen=True)
else:
	record = struct = partial(dataclasses.dataclass, slots=True, eq=True, frozen=True)
