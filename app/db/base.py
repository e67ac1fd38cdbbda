from app.db.session import Base
from app.models.user import User
from app.models.hall import Hall
from app.models.movie import Movie, Genre, Actor, movie_genres, movie_actors
from app.models.movie_session import MovieSession
from app.models.ticket import Ticket, TicketStatus
