"""
Auth Service - handles user authentication and registration.
"""
from .base import (
    HTTPException, uuid, logging,
    get_db_session, UserORM
)
from auth import verify_password, get_password_hash, create_access_token

logger = logging.getLogger("fitness_app")


class AuthService:
    """Service for managing authentication and user registration."""

    def authenticate_user(self, username: str, password: str):
        """Authenticate a user by username and password. Returns the user or False."""
        db = get_db_session()
        try:
            user = db.query(UserORM).filter(UserORM.username == username).first()
            if not user:
                return False
            if not verify_password(password, user.hashed_password):
                return False
            return user
        finally:
            db.close()

    def login(self, username: str, password: str) -> dict:
        user = self.authenticate_user(username, password)
        if not user:
            logger.info(f"Failed login attempt for {username}")
            raise HTTPException(status_code=401, detail="Incorrect username or password")
        if not user.is_active:
            raise HTTPException(status_code=403, detail="Account is disabled")

        token = create_access_token({"sub": user.username, "role": user.role})
        return {
            "access_token": token,
            "token_type": "bearer",
            "role": user.role,
            "user_id": user.id
        }

    def register_user(self, user_data: dict) -> dict:
        """Register a new user with the default role."""
        logger.debug(f"register_user called for {user_data.get('username')}")
        db = get_db_session()
        try:
            # Handle empty email as None
            email = user_data.get("email") or None

            query = db.query(UserORM).filter(UserORM.username == user_data["username"])
            if email:
                query = db.query(UserORM).filter(
                    (UserORM.username == user_data["username"]) |
                    (UserORM.email == email)
                )

            if query.first():
                raise HTTPException(status_code=400, detail="Username or email already registered")

            new_user = UserORM(
                id=str(uuid.uuid4()),
                username=user_data["username"],
                email=email,
                full_name=user_data.get("full_name"),
                hashed_password=get_password_hash(user_data["password"]),
                role="user",
                is_active=True
            )

            db.add(new_user)
            db.commit()
            db.refresh(new_user)
            logger.info(f"Registered user {new_user.username}")

            return {"status": "success", "message": "User registered successfully", "user_id": new_user.id}
        except HTTPException:
            raise
        except Exception as e:
            db.rollback()
            logger.error(f"Registration failed: {e}")
            raise HTTPException(status_code=500, detail=f"Registration failed: {str(e)}")
        finally:
            db.close()

    def user_to_dict(self, user: UserORM) -> dict:
        return {
            "id": user.id,
            "username": user.username,
            "email": user.email,
            "full_name": user.full_name,
            "role": user.role,
            "is_active": user.is_active,
            "created_at": user.created_at
        }


# Singleton instance
auth_service = AuthService()

def get_auth_service() -> AuthService:
    """Dependency injection helper."""
    return auth_service
