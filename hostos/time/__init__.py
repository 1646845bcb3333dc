"""
[ About ]
---------

The time project bridges a script engine's calendar and clock facilities to
the time functions of the host operating system. Scripts exchange calendar
time as plain mappings; the project validates those mappings, normalizes
out-of-range fields through the system, renders calendar time as text, and
samples the process' CPU clock.

The surface functionality is provided by &.library:

#!/pl/python
	from hostos.time import library

	library.date('%Y-%m-%d')
	library.date('!*t', 0)['year'] == 1970
	library.time({'year': 2024, 'month': 1, 'day': 32})
	library.difftime(library.time(), 0)
	library.clock()

[ Calendar Records ]
--------------------

&.types.CalendarRecord is the typed form of the script mapping and uses
one-based months, weekdays, and days of the year with absolute years.
&.types.NormalizedCalendarTime mirrors the system's `struct tm`: zero-based
months, years offset from 1900.

Construction does not validate ranges. Fields with excess values overflow
onto larger units when the system normalizes them:

#!/pl/python
	library.time({'year': 2024, 'month': 1, 'day': 32}) == \
		library.time({'year': 2024, 'month': 2, 'day': 1})

The day, month, and year are required; the remaining fields default to
noon with an unknown daylight saving state.

[ Formatting ]
--------------

Patterns are given to the system's `strftime`. A leading `!` selects UTC,
and the pattern `*t` produces a calendar mapping instead of text. The output
size is estimated from the pattern and grown a bounded number of times;
patterns that never produce output yield an empty string.
"""
