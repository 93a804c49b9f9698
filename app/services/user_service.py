from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from app.data.models.user import UserModel
from app.domain.exceptions import ConflictError, NotFoundError
from app.repos.user_repo import UserRepo
from app.domain.schemas import UserCreate, UserRead


class UserService:
    def __init__(self, db: Session):
        self.repo = UserRepo(db)

    def create_user(self, payload: UserCreate) -> UserRead:
        existing = self.repo.get_user(payload.id)
        if existing:
            return UserRead(id=existing.id, email=existing.email)

        user = UserModel(id=payload.id, email=payload.email)
        try:
            created = self.repo.create_user(user)
        except IntegrityError as e:
            self.repo.rollback()
            raise ConflictError(f"Email {payload.email} already registered") from e
        return UserRead(id=created.id, email=created.email)

    def load_user(self, user_id: int) -> UserModel:
        user = self.repo.get_user(user_id)
        if not user:
            raise NotFoundError("User not found")
        return user

    def get_user(self, user_id: int) -> UserRead:
        user = self.load_user(user_id)
        return UserRead(id=user.id, email=user.email)
