import sys
import time
from functools import wraps
from typing import List, Dict, Any, Callable, Optional, Type

# test cases registered by @test, in definition order
_registered: List[Dict[str, Any]] = []

PASS_FACE = '(^ ω ^)'
FAIL_FACE = '(ﾉಥДಥ)ﾉ'


class _c:
    ok = '\033[92m'
    fail = '\033[91m'
    info = '\033[94m'
    grey = '\033[90m'
    reset = '\033[0m'


class TestAssertionError(AssertionError):
    """an assert_that failure, reported apart from unexpected errors."""
    __test__ = False


# --- registration and assertions ---

def test(description: str) -> Callable:
    """decorator to register a function as a test case."""
    def decorator(func: Callable) -> Callable:
        _registered.append({'func': func, 'description': description})

        @wraps(func)
        def wrapper(*args, **kwargs):
            return func(*args, **kwargs)
        return wrapper
    return decorator


def assert_that(condition: Any, message: str = "assertion failed") -> None:
    if not condition:
        raise TestAssertionError(message)


def assert_raises(error_type: Type[BaseException], func: Callable[[], Any],
                  message: str = "expected an error") -> BaseException:
    """calls func and checks that it raises error_type. returns the raised error."""
    try:
        func()
    except error_type as e:
        return e
    raise TestAssertionError(f"{message} ({error_type.__name__} not raised)")


# --- running ---

def _outcome(func: Callable[[], Any]) -> Optional[str]:
    """run one case; None on success, otherwise a one-line reason."""
    try:
        func()
    except TestAssertionError as e:
        return f"assertion failed: {e}"
    except Exception as e:
        return f"{type(e).__name__}: {e}"
    return None


def run(title: str = "test run", cases: Optional[List[Dict[str, Any]]] = None) -> bool:
    """
    run the given cases, or everything registered so far, and print a report.
    returns true when every case passed. registered cases are cleared afterwards
    so one script can run several suites.
    """
    use_registered = cases is None
    cases = list(_registered) if use_registered else cases
    print(f"\n{_c.info}--- {title} ---{_c.reset}")
    started = time.perf_counter()

    failures = 0
    for case in cases:
        reason = _outcome(case['func'])
        if reason is None:
            print(f"  {_c.ok}✔{_c.reset} {PASS_FACE}  {case['description']}")
            continue
        failures += 1
        print(f"  {_c.fail}✖{_c.reset} {FAIL_FACE}  {case['description']}")
        print(f"      {_c.grey}{reason}{_c.reset}")

    elapsed_ms = (time.perf_counter() - started) * 1000
    color = _c.ok if failures == 0 else _c.fail
    print(f"{color}{len(cases) - failures}/{len(cases)} passed in {elapsed_ms:.2f}ms{_c.reset}\n")

    if use_registered:
        _registered.clear()
    return failures == 0


def main(title: str, cases: Optional[List[Dict[str, Any]]] = None) -> None:
    """script entry point: run, then exit 1 if anything failed."""
    sys.exit(0 if run(title, cases) else 1)
