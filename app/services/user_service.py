from typing import List, Optional

from sqlalchemy import insert, literal, or_, select
from sqlalchemy.orm import Session

from app.core.security import hash_password
from app.models import user_model


def get_user_by_id(db: Session, user_id: int) -> Optional[user_model.User]:
    return db.get(user_model.User, user_id)


def get_user_by_email(db: Session, email: str) -> Optional[user_model.User]:
    return db.query(user_model.User).filter(user_model.User.email == email).first()


def get_user_by_username(db: Session, username: str) -> Optional[user_model.User]:
    return db.query(user_model.User).filter(user_model.User.username == username).first()


def user_exists(db: Session, username: str, email: str) -> bool:
    query = db.query(user_model.User.id).filter(
        or_(user_model.User.email == email, user_model.User.username == username)
    )
    return db.query(query.exists()).scalar()


def list_users(db: Session) -> List[user_model.User]:
    return db.query(user_model.User).order_by(user_model.User.id).all()


def create_user(db: Session, username: str, email: str, password: str) -> user_model.User:
    """
    Cria o usuário; o primeiro usuário do sistema vira admin.

    A checagem "tabela vazia" roda dentro do próprio INSERT ... SELECT, numa
    transação SERIALIZABLE em conexão própria: dois cadastros simultâneos não
    conseguem ambos virar admin (no SQLite o lock de escrita já garante isso;
    no Postgres o perdedor recebe erro de serialização).
    """
    User = user_model.User
    first_user = ~select(User.id).correlate(None).exists()
    stmt = insert(User.__table__).from_select(
        ["username", "email", "password", "is_admin"],
        select(
            literal(username),
            literal(email),
            literal(hash_password(password)),
            first_user,
        ),
    )
    with db.get_bind().connect() as conn:
        conn.execution_options(isolation_level="SERIALIZABLE")
        conn.execute(stmt)
        conn.commit()
    return get_user_by_username(db, username)


def delete_user(db: Session, user_id: int) -> bool:
    db_user = db.get(user_model.User, user_id)
    if db_user:
        db.delete(db_user)
        db.commit()
        return True
    return False
