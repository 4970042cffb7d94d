"""
Point d'entrée principal pour le backend FastAPI.

Usage:
    python -m lcshop

Ce mode lance uvicorn directement et lit quelques variables d'environnement:
- PORT: port d'écoute (par défaut 3000)
- UVICORN_RELOAD: active le reload auto en dev ("1"/"true"/"yes")
- LOG_LEVEL: niveau de logs uvicorn (ex: "info", "debug")
"""
import logging
import os
import uvicorn

from lcshop.config import Settings

if __name__ == "__main__":
    settings = Settings.from_env()
    # Logs applicatifs (lcshop.*) au même niveau que uvicorn
    logging.basicConfig(level=settings.log_level.upper(), format="%(levelname)s:     %(name)s %(message)s")
    reload_flag = os.environ.get("UVICORN_RELOAD", "").lower() in ("1", "true", "yes")
    uvicorn.run(
        "lcshop.asgi:app",
        host="0.0.0.0",
        port=settings.port,
        reload=reload_flag,
        log_level=settings.log_level,
    )
