# main.py

from app.application import create_app
from app.core.config import get_settings
from app.logging import setup_logging

setup_logging()
app = create_app()

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=get_settings().HOST, port=get_settings().PORT)
