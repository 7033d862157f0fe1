import nox

PYTHON_VERSIONS = ["3.11", "3.12", "3.13", "3.14"]

# Layers of the warehousing suite, by pytest marker.
LAYERS = ["domain", "application", "integration"]


def _install(session: nox.Session, *extras: str) -> None:
    """Install the project and the requested extras into the nox virtualenv."""
    args = ["poetry", "install"]
    for extra in extras or ("test",):
        args.extend(["--extras", extra])
    session.run(*args, external=True)


@nox.session(python=PYTHON_VERSIONS)
def tests(session: nox.Session) -> None:
    """Run the full warehousing suite against the in-memory providers."""
    _install(session)
    session.run("pytest", *session.posargs)


@nox.session(python=PYTHON_VERSIONS[-1])
@nox.parametrize("layer", LAYERS)
def layer(session: nox.Session, layer: str) -> None:
    """Run one layer of the suite, e.g. `nox -s "layer(layer='domain')"`."""
    _install(session)
    session.run("pytest", "-m", layer, *session.posargs)


@nox.session(python=PYTHON_VERSIONS[-1])
def postgresql(session: nox.Session) -> None:
    """Run the suite against PostgreSQL. Requires DATABASE_URL."""
    _install(session, "test", "postgresql")
    session.run("pytest", "--env", "production", *session.posargs)
