from pytest import Item, fixture

from infixcalc import AngleMode, Calculator


@fixture
def calculator() -> Calculator:
    '''
    Calculator as a user gets it by default: radians, lenient.
    '''
    return Calculator()


@fixture
def degrees() -> Calculator:
    return Calculator(angle_mode=AngleMode.DEGREES)


@fixture
def strict() -> Calculator:
    return Calculator(strict_identifiers=True, strict_numbers=True)


def pytest_assertion_pass(item: Item,
                          lineno: int,
                          orig: str,
                          expl: str) -> None:
    '''
    Print every passing assertion, to audit which expressions were checked.

    Needs enable_assertion_pass_hook. Use with pytest -rP.
    '''
    print('passed', item.name + ':' + str(lineno), str(orig))
