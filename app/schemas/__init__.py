from app.schemas.common import PaginatedResponse, ErrorResponse
from app.schemas.user import User, UserCreate, AdminCreate, UserSummary, Token
from app.schemas.hall import Hall, HallCreate, HallUpdate, HallSummary
from app.schemas.movie import (
    Genre, GenreCreate, Movie, MovieCreate, MovieUpdate, MovieSummary,
    Actor, ActorCreate, ActorUpdate, ActorDetail,
)
from app.schemas.movie_session import (
    MovieSession, MovieSessionCreate, MovieSessionUpdate,
    SeatMapResponse, BookedSeat, RowAvailabilityResponse, SeatAvailabilityResponse,
)
from app.schemas.ticket import (
    Ticket, TicketCreate, TicketUpdate, TicketWithSession, AdminTicket,
)
