"""
ASGI config for checkout_service project.
"""

import os

os.environ.setdefault('DJANGO_SETTINGS_MODULE',
                      'checkout_service.settings.production')

from django.core.asgi import get_asgi_application  # noqa: E402


class HealthCheckMiddleware:
    """
    ASGI middleware to handle health checks and lifespan protocol.
    """

    def __init__(self, app):
        self.app = app

    async def __call__(self, scope, receive, send):
        if scope["type"] == "lifespan":
            while True:
                message = await receive()
                if message["type"] == "lifespan.startup":
                    await send({"type": "lifespan.startup.complete"})
                elif message["type"] == "lifespan.shutdown":
                    await send({"type": "lifespan.shutdown.complete"})
                    return

        # Answer health checks before Django so they never touch Stripe or DynamoDB
        if scope["type"] == "http" and scope.get("path") == "/health":
            await send({
                "type": "http.response.start",
                "status": 200,
                "headers": [[b"content-type", b"text/plain"]],
            })
            await send({
                "type": "http.response.body",
                "body": b"OK",
            })
            return

        await self.app(scope, receive, send)


application = HealthCheckMiddleware(get_asgi_application())
