import itertools
from .. import calendar
from .. import types
from . import mock

def test_decompose_utc(test):
	r = calendar.decompose(0, True)
	test/r == types.CalendarRecord(
		second=0, minute=0, hour=0,
		day=1, month=1, year=1970,
		weekday=5, yearday=1, isdst=False,
	)

def test_decompose_local(test):
	mock.zone(test)
	r = calendar.decompose(0)
	test/(r.year, r.month, r.day, r.hour) == (1969, 12, 31, 19)
	test/r.weekday == 4 # Wednesday
	test/r.yearday == 365

def test_decompose_invalid(test):
	with test/types.InvalidInstant as exc:
		calendar.decompose(10**20, True)
	test/exc().instant == 10**20
	test/exc().utc == True

def test_record_isdst(test):
	ntm = types.NormalizedCalendarTime(0, 0, 0, 1, 0, 70, tm_isdst=-1)
	test/calendar.record(ntm).isdst == None
	ntm = types.NormalizedCalendarTime(0, 0, 0, 1, 0, 70, tm_isdst=1)
	test/calendar.record(ntm).isdst == True

def test_compose_defaults(test):
	ntm = calendar.compose({'day': 15, 'month': 3, 'year': 2021})
	test/ntm == types.NormalizedCalendarTime(
		tm_sec=0, tm_min=0, tm_hour=12,
		tm_mday=15, tm_mon=2, tm_year=121,
		tm_isdst=-1,
	)

def test_compose_record(test):
	r = types.CalendarRecord(5, 6, 7, 8, 9, 1999, isdst=False)
	ntm = calendar.compose(r)
	test/(ntm.tm_sec, ntm.tm_min, ntm.tm_hour) == (5, 6, 7)
	test/(ntm.tm_mday, ntm.tm_mon, ntm.tm_year) == (8, 8, 99)
	test/ntm.tm_isdst == 0

def test_compose_coercion(test):
	ntm = calendar.compose({'day': '5', 'month': 1.9, 'year': 2024, 'hour': 'x'})
	test/ntm.tm_mday == 5
	test/ntm.tm_mon == 0
	test/ntm.tm_hour == 12

def test_compose_missing(test):
	with test/types.MissingRequiredField as exc:
		calendar.compose({'hour': 5})
	test/exc().field == 'day'

	with test/types.MissingRequiredField as exc:
		calendar.compose({'day': 1, 'year': 2000})
	test/exc().field == 'month'

	with test/types.MissingRequiredField as exc:
		calendar.compose({'day': 1, 'month': 1, 'year': 'x'})
	test/exc().field == 'year'

def test_construct_roundtrip(test):
	mock.zone(test)
	fields = itertools.product(
		(1, 15, 28), (1, 6, 12), (1970, 2000, 2024),
		(0, 13, 23), (0, 59), (0, 30, 59),
	)
	for day, month, year, hour, minute, second in fields:
		t = calendar.construct({
			'day': day, 'month': month, 'year': year,
			'hour': hour, 'min': minute, 'sec': second,
		})
		r = calendar.decompose(t)
		test/(r.day, r.month, r.year) == (day, month, year)
		test/(r.hour, r.minute, r.second) == (hour, minute, second)

def test_construct_overflow(test):
	mock.zone(test)
	a = calendar.construct({'day': 32, 'month': 1, 'year': 2024})
	b = calendar.construct({'day': 1, 'month': 2, 'year': 2024})
	test/a == b

	a = calendar.construct({'day': 0, 'month': 3, 'year': 2024, 'hour': 0})
	test/calendar.decompose(a).day == 29
	a = calendar.construct({'day': 1, 'month': 13, 'year': 2023, 'sec': -1})
	r = calendar.decompose(a)
	test/(r.year, r.month, r.day, r.hour, r.minute, r.second) == (2024, 1, 1, 11, 59, 59)

def test_construct_unrepresentable(test):
	with test/types.UnrepresentableTime as exc:
		calendar.construct({'day': 1, 'month': 1, 'year': 10**12})
	test/exc().struct.tm_mday == 1

if __name__ == '__main__':
	import sys; from ...test import engine
	engine.execute(sys.modules[__name__])
