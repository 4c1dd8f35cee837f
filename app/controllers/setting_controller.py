from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.core.dependencies import get_db, get_current_user_id, require_admin
from app.core.exceptions import Forbidden
from app.models.setting_model import PUBLIC_SETTING_KEYS
from app.schemas import setting_schema
from app.services import setting_service, user_service

router = APIRouter(
    prefix="/api/settings",
    tags=["Configurações"],
)


def _is_admin(db: Session, user_id: int) -> bool:
    user = user_service.get_user_by_id(db, user_id)
    return bool(user and user.is_admin)


@router.get("", response_model=List[setting_schema.SettingOut])
def listar_settings(
    db: Session = Depends(get_db),
    user_id: int = Depends(get_current_user_id),
):
    """Admins veem todas as configurações; os demais só as públicas."""
    return setting_service.listar_settings(db, include_private=_is_admin(db, user_id))

@router.get("/{key}", response_model=setting_schema.SettingOut)
def get_setting(
    key: str,
    db: Session = Depends(get_db),
    user_id: int = Depends(get_current_user_id),
):
    if key not in PUBLIC_SETTING_KEYS and not _is_admin(db, user_id):
        raise Forbidden()
    return setting_service.get_setting_or_404(db, key)

@router.put("/{key}", response_model=setting_schema.SettingOut)
def update_setting(
    key: str,
    setting_in: setting_schema.SettingUpdate,
    db: Session = Depends(get_db),
    _: int = Depends(require_admin),
):
    return setting_service.update_setting(db, key, setting_in)

@router.post("", response_model=setting_schema.SettingOut, status_code=status.HTTP_201_CREATED)
def criar_setting(
    setting_in: setting_schema.SettingCreate,
    db: Session = Depends(get_db),
    _: int = Depends(require_admin),
):
    return setting_service.criar_setting(db, setting_in)

@router.post("/{key}", response_model=setting_schema.SettingOut, status_code=status.HTTP_201_CREATED)
def criar_setting_por_chave(
    key: str,
    setting_in: setting_schema.SettingUpdate,
    db: Session = Depends(get_db),
    _: int = Depends(require_admin),
):
    setting = setting_schema.SettingCreate(
        key=key,
        value=setting_in.value,
        description=setting_in.description,
    )
    return setting_service.criar_setting(db, setting)

@router.delete("/{key}", response_model=setting_schema.MessageResponse)
def delete_setting(
    key: str,
    db: Session = Depends(get_db),
    _: int = Depends(require_admin),
):
    setting_service.delete_setting(db, key)
    return {"message": "Setting deleted successfully"}
