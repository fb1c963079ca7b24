"""Allow ``python -m groupie`` to start the web server."""

from groupie.main import run

run()
