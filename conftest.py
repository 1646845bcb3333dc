"""
# Run pytest collected `test_` functions through the &hostos.test harness.
"""
import pytest

from hostos.test import core

@pytest.fixture
def test(request):
	t = core.Test(request.node.name, request.function)
	with t.exits:
		yield t

@pytest.hookimpl(tryfirst=True)
def pytest_pyfunc_call(pyfuncitem):
	t = pyfuncitem.funcargs.get('test')
	if not isinstance(t, core.Test) or len(pyfuncitem.funcargs) != 1:
		return None

	t.seal()
	fate = t.fate
	if fate.subtype == 'skip':
		pytest.skip(str(fate.content))
	if fate.negative:
		if fate.__cause__ is not None:
			raise fate.__cause__
		pytest.fail(str(fate.content))
	return True
