from fastapi import FastAPI, HTTPException
from pydantic import BaseModel
from pathlib import Path
import json
import os
import secrets

app = FastAPI(title="Mock Bank Server", version="1.0.0")
# Support both local development and Docker
DATA_DIR = Path("/bank_stub") if os.path.exists("/bank_stub") else Path(__file__).resolve().parents[2] / "bank_stub"

# card_number -> {"pin", "balance", "currency"}; reloaded on every process start
ACCOUNTS = json.loads((DATA_DIR / "accounts.json").read_text())
# token -> card_number; each token is consumed by one charge
TOKENS: dict[str, str] = {}
# card_number -> its only live token; a new authorize replaces the old one
CARD_TOKENS: dict[str, str] = {}


class AuthorizeRequest(BaseModel):
    pin: str
    card_number: str


class ChargeRequest(BaseModel):
    token: str
    amount: int
    currency: str


@app.get("/health")
def health(): return {"status": "ok"}

@app.post("/bank/authorize")
def authorize(body: AuthorizeRequest):
    account = ACCOUNTS.get(body.card_number)
    if account is None:
        raise HTTPException(status_code=404, detail="card not found")
    if account["pin"] != body.pin:
        raise HTTPException(status_code=401, detail="wrong pin")
    token = secrets.token_hex(16)
    stale = CARD_TOKENS.pop(body.card_number, None)
    if stale is not None:
        TOKENS.pop(stale, None)
    TOKENS[token] = body.card_number
    CARD_TOKENS[body.card_number] = token
    return {"token": token}

@app.post("/bank/charge")
def charge(body: ChargeRequest):
    card_number = TOKENS.pop(body.token, None)
    if card_number is None:
        raise HTTPException(status_code=401, detail="unknown or used token")
    CARD_TOKENS.pop(card_number, None)
    account = ACCOUNTS[card_number]
    if body.currency != account["currency"]:
        raise HTTPException(status_code=409, detail="currency mismatch")
    if body.amount > account["balance"]:
        raise HTTPException(status_code=402, detail="insufficient funds")
    account["balance"] -= body.amount
    return {"status": "charged", "balance": account["balance"]}
