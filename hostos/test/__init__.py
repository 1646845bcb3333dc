"""
# Test harness for the &hostos projects.

# Test modules define `test_` prefixed functions taking a single &core.Test
# parameter. Assertions are made with contentions:

#!/pl/python
	def test_roundtrip(test):
		test/calendar.decompose(0, True).year == 1970

# &engine.execute runs every test in a module; the root `conftest.py` hands
# &core.Test instances to pytest collected functions.
"""
