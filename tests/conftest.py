from pytest import Item, fixture

from rpncalc import CLI, History, Lexer


@fixture
def lexer() -> Lexer:
    return Lexer()


@fixture
def history() -> History:
    return History()


@fixture
def cli() -> CLI:
    return CLI()


def pytest_assertion_pass(item: Item,
                          lineno: int,
                          orig: str,
                          expl: str) -> None:
    '''
    Log every passing assertion, to audit which expressions were checked.

    Use with pytest -rP.
    '''
    print('given', item.name + ':' + str(lineno), str(orig))  # no repr()!
    print('actual', item.name + ':' + str(lineno),
          # Drop the full-diff hint lines at the end.
          '\n'.join(str(expl).splitlines()[:-2]))
