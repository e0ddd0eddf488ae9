from __future__ import annotations

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from ..domain.models import Account, Role
from ..services import account_svc, admin_svc

router = APIRouter()


class AccountRegister(BaseModel):
    first: str
    last: str
    email: str
    credential: str


class AccountUpdate(BaseModel):
    first: str
    last: str
    email: str
    credential: str
    role: str | None = None  # keeps the stored role when omitted


class LoginBody(BaseModel):
    email: str
    credential: str
    role: str | None = None  # STANDARD / ADMINISTRATOR


def _role_or_400(name: str | None) -> Role | None:
    if name is None:
        return None
    try:
        return Role.from_name(name.upper())
    except KeyError:
        raise HTTPException(status_code=400, detail=f"unknown_role: {name}")


@router.post("/api/accounts/register", status_code=201)
def api_register(body: AccountRegister):
    try:
        new_id = account_svc.register_account(body.first, body.last, body.email, body.credential)
    except ValueError as ve:
        raise HTTPException(status_code=400, detail=str(ve))
    if new_id is None:
        raise HTTPException(status_code=409, detail="email_already_registered")
    return {"id": new_id}


@router.post("/api/accounts/login")
def api_login(body: LoginBody):
    role = _role_or_400(body.role)
    if role is Role.ADMINISTRATOR and not account_svc.is_admin_email(body.email):
        raise HTTPException(status_code=400, detail=f"admin_email_must_end_with {account_svc.ADMIN_EMAIL_DOMAIN}")
    account = account_svc.validate_login(body.email, body.credential, expected_role=role)
    if account is None:
        raise HTTPException(status_code=401, detail="invalid_credentials")
    return account.to_public_dict()


@router.get("/api/accounts")
def api_accounts():
    return {"items": [a.to_public_dict() for a in account_svc.get_all_accounts()]}


@router.get("/api/accounts/{account_id}")
def api_account(account_id: int):
    account = account_svc.get_account_by_id(account_id)
    if account is None:
        raise HTTPException(status_code=404, detail="account_not_found")
    return account.to_public_dict()


@router.put("/api/accounts/{account_id}")
def api_account_update(account_id: int, body: AccountUpdate):
    role = _role_or_400(body.role)
    if role is None:
        current = account_svc.get_account_by_id(account_id)
        if current is None:
            raise HTTPException(status_code=404, detail="account_not_found")
        role = current.role
    account = Account(
        id=account_id,
        first=body.first,
        last=body.last,
        email=body.email,
        credential=body.credential,
        role=role,
    )
    try:
        n = account_svc.update_account(account)
    except ValueError as ve:
        raise HTTPException(status_code=400, detail=str(ve))
    if n == 0:
        if account_svc.get_account_by_id(account_id) is None:
            raise HTTPException(status_code=404, detail="account_not_found")
        raise HTTPException(status_code=409, detail="email_already_registered")
    return {"updated": n}


@router.delete("/api/accounts/{account_id}")
def api_account_delete(account_id: int):
    if account_svc.delete_account(account_id) == 0:
        raise HTTPException(status_code=404, detail="account_not_found")
    return {"message": "ok"}


@router.get("/api/admin/overview")
def api_admin_overview():
    return admin_svc.admin_overview()
