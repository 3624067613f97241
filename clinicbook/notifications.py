"""
Booking notifications
Fire-and-forget: failures are logged and dropped, never surfaced to the booking caller
"""

import logging

from .email_service import send_appointment_confirmation

logger = logging.getLogger(__name__)


class BookingNotifier:
    """Sends the confirmation email for a stored booking"""

    def __init__(self, send_func=send_appointment_confirmation):
        self.send_func = send_func

    async def notify_booking(self, booking: dict) -> bool:
        """
        Notify the patient of a new booking.

        Returns True when the email was handed to the provider. Any failure is
        logged and reported as False; there are no retries.
        """
        recipient = booking.get("patient")
        if not recipient:
            logger.debug(f"⚠️ No patient email on booking {booking.get('id')}, skipping notification")
            return False

        try:
            logger.info(f"📧 Sending appointment confirmation to {recipient}")
            await self.send_func(
                to=recipient,
                patient_name=booking.get("patientName") or recipient,
                treatment=booking.get("treatment", ""),
                date=booking.get("date", ""),
                slot=booking.get("slot", ""),
            )
            logger.info(f"✅ Appointment confirmation sent to {recipient}")
            return True
        except Exception as e:
            logger.error(f"❌ Failed to send appointment confirmation to {recipient}: {e}")
            return False


def get_booking_notifier() -> BookingNotifier:
    """Dependency injection for BookingNotifier"""
    return BookingNotifier()
