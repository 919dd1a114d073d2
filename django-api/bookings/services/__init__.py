from bookings.services.registration_service import RegistrationService

__all__ = ["RegistrationService"]
