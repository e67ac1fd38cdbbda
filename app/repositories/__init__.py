from app.repositories.session_repository import SessionRepository
from app.repositories.ticket_repository import TicketRepository
