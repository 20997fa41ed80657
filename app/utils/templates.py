from decimal import Decimal
from pathlib import Path
from fastapi.templating import Jinja2Templates
from app.utils.flash import get_flashed_messages

TEMPLATES_DIR = Path(__file__).resolve().parents[1] / "templates"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))


def naira(value) -> str:
    if value is None or value == "":
        return ""
    return f"₦{Decimal(str(value)):,.0f}"


templates.env.filters["naira"] = naira
templates.env.globals["get_flashed_messages"] = get_flashed_messages
