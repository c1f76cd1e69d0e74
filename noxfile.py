"""noxfile that runs isolated testing environments using nox.

To run all sessions, run `nox` in the root of the repository.

To run a specific session, run `nox -s <session_name>`.

You can pass any arguments as needed to pytest by adding them after --, for
example:

    nox -s code_tests -- -k test_with_prefix
"""

import nox


nox.options.sessions = ["code_tests"]
nox.options.reuse_existing_virtualenvs = True
nox.options.stop_on_first_error = False


def install_dependencies(session):
    """Install the dependencies required for the test session."""
    session.install("-r", "requirements.txt")
    session.install("-r", "requirements_dev.txt")

    # Install the package in editable mode, with no dependencies.
    session.install("-e", ".", "--no-deps")


@nox.session(python=["3.10", "3.12"])
def code_tests(session):
    """Run the code tests."""
    install_dependencies(session)

    session.run(
        "pytest",
        "cookier_tests/test_code.py",
        "-W",
        "error::DeprecationWarning",
        *session.posargs,
    )
