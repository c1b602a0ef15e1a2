from sympy import Rational
from sympy.testing.pytest import raises

from ..settings import SolveConfigs
from ...utils import ComplexField, ExpressionDomain, MPComplexField, RealField

def test_solve_configs():
    configs = SolveConfigs()
    assert configs.domain is None and configs.tol == 0 and configs.dps == 15 and configs.verbose is False
    assert configs.keys() == ['domain', 'tol', 'dps', 'verbose']
    assert dict(configs.items()) == {'domain': None, 'tol': 0, 'dps': 15, 'verbose': False}
    assert configs['dps'] == 15

    configs = SolveConfigs(domain='MP', dps=30, verbose=True)
    assert configs.values() == ['MP', 0, 30, True]
    assert repr(configs) == "SolveConfigs(domain='MP', tol=0, dps=30, verbose=True)"
    assert str(configs) == "SolveConfigs(domain=MP, tol=0, dps=30, verbose=True)"

    # class defaults are not modified
    assert SolveConfigs.dps == 15

    raises(TypeError, lambda: SolveConfigs(max_iters=10))

def test_get_domain():
    assert isinstance(SolveConfigs().get_domain([1, 2]), ComplexField)
    assert isinstance(SolveConfigs().get_domain([Rational(1, 2)]), ExpressionDomain)

    dom = SolveConfigs(domain='RR', tol=1e-9).get_domain([1, 2])
    assert isinstance(dom, RealField) and dom.tol == 1e-9

    dom = SolveConfigs(domain='mp', dps=40).get_domain([1])
    assert isinstance(dom, MPComplexField) and dom.dps == 40
