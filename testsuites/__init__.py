"""
Test suites package.

Kept importable so the unit tests can share `testsuites.support` doubles and
`run_tests.py` can address suites by module path.
"""
