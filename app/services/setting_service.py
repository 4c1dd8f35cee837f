import logging
from typing import List, Optional

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.exceptions import Conflict, NotFound, ValidationError
from app.models.setting_model import PUBLIC_SETTING_KEYS, Setting
from app.schemas import setting_schema

logger = logging.getLogger(__name__)


def get_setting(db: Session, key: str) -> Optional[Setting]:
    return db.query(Setting).filter(Setting.key == key).first()


def get_setting_or_404(db: Session, key: str) -> Setting:
    setting = get_setting(db, key)
    if not setting:
        raise NotFound("Setting not found")
    return setting


def listar_settings(db: Session, include_private: bool) -> List[Setting]:
    query = db.query(Setting)
    if not include_private:
        query = query.filter(Setting.key.in_(PUBLIC_SETTING_KEYS))
    return query.order_by(Setting.key).all()


def criar_setting(db: Session, setting_in: setting_schema.SettingCreate) -> Setting:
    if not setting_in.key or setting_in.value is None:
        raise ValidationError("Key and value are required")
    if get_setting(db, setting_in.key):
        raise Conflict("Setting already exists")

    setting = Setting(
        key=setting_in.key,
        value=setting_in.value,
        description=setting_in.description or "",
    )
    db.add(setting)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise Conflict("Setting already exists")
    db.refresh(setting)
    logger.info(f"Configuração '{setting.key}' criada")
    return setting


def update_setting(db: Session, key: str, setting_in: setting_schema.SettingUpdate) -> Setting:
    if setting_in.value is None:
        raise ValidationError("Value is required")
    setting = get_setting_or_404(db, key)

    setting.value = setting_in.value
    if setting_in.description is not None:
        setting.description = setting_in.description
    setting.updated_at = func.now()
    db.commit()
    db.refresh(setting)
    # Nunca loga o valor: jwt_secret passa por aqui
    logger.info(f"Configuração '{key}' atualizada")
    return setting


def delete_setting(db: Session, key: str) -> None:
    deleted = db.query(Setting).filter(Setting.key == key).delete(synchronize_session=False)
    if not deleted:
        raise NotFound("Setting not found")
    db.commit()
    logger.info(f"Configuração '{key}' removida")
