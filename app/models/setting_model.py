from sqlalchemy import Column, Integer, String, Text, DateTime, func
from app.core.database import Base

# Chave reservada com o segredo de assinatura dos tokens
JWT_SECRET_KEY = "jwt_secret"
ALLOW_REGISTRATION_KEY = "allow_registration"

# Únicas chaves visíveis para usuários que não são admin
PUBLIC_SETTING_KEYS = ("app_name", ALLOW_REGISTRATION_KEY)

class Setting(Base):
    __tablename__ = "settings"

    id          = Column(Integer, primary_key=True, index=True)
    key         = Column(String, unique=True, index=True, nullable=False)
    value       = Column(Text, nullable=False)
    description = Column(Text, nullable=True)
    updated_at  = Column(DateTime, nullable=False, server_default=func.now(), onupdate=func.now())
