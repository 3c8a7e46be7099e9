# scrapless/main.py
from dotenv import load_dotenv
load_dotenv()  # load .env before anything else

import traceback
from datetime import date
from typing import List, Optional

from fastapi import FastAPI, Form, Query, Request
from fastapi.responses import JSONResponse

# === Conversion + impact core ===
from .errors import ConversionError
from .impact import lookup_impact
from .utils.units import denormalize_from_base_unit, normalize_to_base_unit

# === Consumers ===
from .calculator import value_items
from .pantry import deduct_usage, forecast
from .parsers import parse_text
from .schemas import QuantityExpression
from .shopping import merge_quantities


# ---- FastAPI app ------------------------------------------------------------
app = FastAPI(title="Scrapless")


@app.exception_handler(ConversionError)
async def conversion_error(request: Request, exc: ConversionError):
    print(f"[api] {request.url.path}: {exc}")
    return JSONResponse({"ok": False, "error": str(exc)}, status_code=422)


@app.get("/health")
def health():
    return {"ok": True}


# ---- Units ------------------------------------------------------------------
@app.get("/units/normalize")
def units_normalize(quantity: float, unit: str, item: str):
    return normalize_to_base_unit(quantity, unit, item)


@app.get("/units/denormalize")
def units_denormalize(quantity: float, base_unit: str, target_unit: str, item: str):
    return denormalize_from_base_unit(quantity, base_unit, target_unit, item)


# ---- Impact / waste ---------------------------------------------------------
@app.get("/impact")
def impact(item: str = Query(...)):
    return lookup_impact(item)


@app.post("/waste/value")
def waste_value(items: List[QuantityExpression]):
    return value_items(items)


@app.post("/waste/parse")
def waste_parse(Body: str = Form(""), value: bool = Form(True)):
    try:
        items = parse_text(Body)
        print(f"PARSED ITEMS: {items}")
        if not value:
            return {"ok": True, "items": items}
        return {"ok": True, "items": items, "valuation": value_items(items)}
    except Exception as e:
        traceback.print_exc()
        return JSONResponse({"ok": False, "error": str(e)}, status_code=500)


# ---- Pantry -----------------------------------------------------------------
@app.get("/pantry/forecast")
def pantry_forecast(item: str, logged_on: date, today: Optional[date] = None):
    return forecast(item, logged_on, today=today)


@app.post("/pantry/deduct")
def pantry_deduct(stock: QuantityExpression, used: QuantityExpression):
    return deduct_usage(stock, used)


# ---- Shopping ---------------------------------------------------------------
@app.post("/shopping/merge")
def shopping_merge(items: List[QuantityExpression], target_unit: Optional[str] = None):
    return merge_quantities(items, target_unit=target_unit)
