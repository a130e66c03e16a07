"""
Start the Student Enrollment API under uvicorn (no reload).

Host, port and log level come from the environment or ``.env``; install
the project first (``pip install -e .``).
"""
import uvicorn

from app.config import settings


def main():
    """Serve ``app.main:app`` on HOST:PORT."""
    print(f"🚀 Student Enrollment API on http://{settings.HOST}:{settings.PORT}")
    print(f"📖 API Documentation: http://localhost:{settings.PORT}/docs")
    if settings.uses_default_admin_token:
        print("⚠️  ADMIN_TOKEN is still the default; set it before exposing this server")

    uvicorn.run(
        "app.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=False,
        log_level=settings.LOG_LEVEL.lower()
    )


if __name__ == "__main__":
    main()
