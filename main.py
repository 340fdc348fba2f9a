import logging
import uvicorn
from fastapi import Depends, FastAPI, HTTPException

from sparse_fields import FieldSelector
from sparse_fields.dependencies import FieldSelection, SelectedFields


logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s")
logger = logging.getLogger(__name__)

USERS = {
    1: {
        "id": 1,
        "name": "John",
        "email": "john@example.com",
        "phone": "123456789",
        "address": "123 Main St",
        "createdAt": "2024-01-01T00:00:00Z",
        "updatedAt": "2024-06-01T00:00:00Z",
    },
    2: {
        "id": 2,
        "name": "Jane",
        "email": "jane@example.com",
        "phone": "987654321",
        "address": "42 Side Rd",
        "createdAt": "2024-02-01T00:00:00Z",
        "updatedAt": "2024-07-01T00:00:00Z",
    },
}

user_selector = FieldSelector(
    {
        "available_fields": ["id", "name", "email", "phone", "address", "createdAt", "updatedAt"],
        "default_fields": ["id", "name", "email"],
        "field_groups": {
            "basic": ["id", "name"],
            "contact": ["email", "phone"],
            "timestamps": ["createdAt", "updatedAt"],
        },
    }
)
user_fields = FieldSelection(user_selector)


def create_app() -> FastAPI:
    """Create the example FastAPI application."""
    app = FastAPI(title="Sparse Fields Example")

    @app.get("/users", tags=["Users"])
    async def list_users(fields: SelectedFields = Depends(user_fields)):
        return fields.apply(list(USERS.values()))

    @app.get("/users/{user_id}", tags=["Users"])
    async def get_user(user_id: int, fields: SelectedFields = Depends(user_fields)):
        user = USERS.get(user_id)
        if user is None:
            raise HTTPException(status_code=404, detail="User not found")
        return fields.apply(user)

    return app


app = create_app()


if __name__ == "__main__":
    logger.info("Starting example server...")
    uvicorn.run(app, host="127.0.0.1", port=8000)
