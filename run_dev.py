"""Development runner that imports the app factory and runs the Flask dev server.

Connections are closed when the server stops.
"""
import atexit

from temfy import close_connections, create_app
from temfy.config import settings

if __name__ == '__main__':
    app = create_app()
    atexit.register(close_connections, app)
    app.run(host=settings.SERVER_HOST, port=settings.SERVER_PORT, debug=settings.DEBUG)
