import uvicorn

from schedule_handler.core.config import get_settings
from schedule_handler.main import app  # noqa: F401  (uvicorn main:app)

if __name__ == "__main__":
    settings = get_settings()
    uvicorn.run("schedule_handler.main:app", host="0.0.0.0", port=8000, reload=settings.APP_ENV == "dev")
