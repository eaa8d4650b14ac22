# External package imports
import uvicorn
from dotenv import load_dotenv

# Local application imports
from .core.config import get_settings


def main() -> None:
    """Serve the API with uvicorn on the configured host and port"""
    load_dotenv()
    settings = get_settings()
    uvicorn.run("vending_machine.main:app", host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
