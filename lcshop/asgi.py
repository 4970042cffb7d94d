"""
ASGI entrypoint: expose `app` pour les process managers / déploiements.

- En production, un process manager (ex: uvicorn, gunicorn -k uvicorn.workers.UvicornWorker)
  importe `lcshop.asgi:app`.
- Toute la configuration FastAPI est centralisée dans lcshop.app.
"""

from lcshop.app import app

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "lcshop.asgi:app",
        host="0.0.0.0",
        port=app.state.settings.port,
        reload=True,
    )
