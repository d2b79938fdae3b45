import uvicorn

from todoapp.core.config import settings
from todoapp.main import create_app

app = create_app(settings)

if __name__ == "__main__":
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())
