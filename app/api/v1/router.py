from fastapi import APIRouter

# Auth
from app.api.v1.public.auth import router as auth_router

# Public: catalogue
from app.api.v1.public.movies import router as public_movies_router, genres_router
from app.api.v1.public.actors import router as public_actors_router

# Public: sessions, seat map, availability
from app.api.v1.public.sessions import router as public_sessions_router

# Public: tickets
from app.api.v1.public.tickets import router as tickets_router

# Admin
from app.api.v1.admin.halls import router as halls_router
from app.api.v1.admin.movies import router as movies_router, genre_router
from app.api.v1.admin.actors import router as actors_router
from app.api.v1.admin.sessions import router as sessions_router
from app.api.v1.admin.tickets import router as admin_tickets_router

api_router = APIRouter()

# --- Auth ---
api_router.include_router(auth_router)

# --- Public: catalogue ---
api_router.include_router(public_movies_router)
api_router.include_router(genres_router)
api_router.include_router(public_actors_router)

# --- Public: sessions & seat availability ---
api_router.include_router(public_sessions_router)

# --- Public: tickets ---
api_router.include_router(tickets_router)

# --- Admin ---
api_router.include_router(halls_router)
api_router.include_router(movies_router)
api_router.include_router(genre_router)
api_router.include_router(actors_router)
api_router.include_router(sessions_router)
api_router.include_router(admin_tickets_router)
