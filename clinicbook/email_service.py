"""
Email Service using the clinic SMTP relay or Resend (fallback)
Templates are written in MJML and compiled to HTML before sending
"""

import logging
import smtplib
import ssl
from datetime import datetime, timezone
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText
from typing import Optional, Union

import resend
from mjml import mjml_to_html

from . import config
from .email_templates import appointment_confirmed_template

logger = logging.getLogger(__name__)

# Initialize Resend as fallback
resend.api_key = config.RESEND_API_KEY


def compile_mjml_to_html(mjml_content: str) -> str:
    """Compile MJML template to production-ready HTML"""
    try:
        result = mjml_to_html(mjml_content)
        # Newer releases return a result object, older ones a dict
        if isinstance(result, dict):
            if result.get("errors"):
                logger.warning(f"MJML compilation warnings: {result['errors']}")
            return result.get("html", "")
        if getattr(result, "errors", None):
            logger.warning(f"MJML compilation warnings: {result.errors}")
        return getattr(result, "html", str(result))
    except Exception as e:
        logger.error(f"MJML compilation error: {e}")
        raise Exception(f"Failed to compile MJML template: {str(e)}") from e


def send_via_smtp(recipients: list[str], subject: str, html_content: str, from_address: str) -> dict:
    """Send email via the configured SMTP relay"""
    host = config.SMTP_HOST
    port = config.SMTP_PORT

    msg = MIMEMultipart("mixed")
    msg["Subject"] = subject
    msg["From"] = from_address
    msg["To"] = ", ".join(recipients)
    msg.attach(MIMEText(html_content, "html"))

    if port == 465:
        context = ssl.create_default_context()
        server = smtplib.SMTP_SSL(host, port, context=context, timeout=30)
    else:
        server = smtplib.SMTP(host, port, timeout=30)
        if config.SMTP_USE_TLS:
            server.starttls(context=ssl.create_default_context())

    try:
        if config.SMTP_USERNAME:
            server.login(config.SMTP_USERNAME, config.SMTP_PASSWORD or "")
        server.sendmail(from_address.split("<")[-1].rstrip(">"), recipients, msg.as_string())
    finally:
        server.quit()

    logger.info(f"✅ SMTP email sent successfully via {host}")
    return {"id": f"smtp-{datetime.now(timezone.utc).timestamp()}", "success": True}


async def send_email(
    to: Union[str, list[str]],
    subject: str,
    mjml_content: str,
    from_address: Optional[str] = None,
) -> dict:
    """
    Send an email using SMTP (if configured) or Resend (fallback)

    Args:
        to: Recipient email(s)
        subject: Email subject line
        mjml_content: MJML template content (will be compiled to HTML)
        from_address: Optional custom from address

    Returns:
        Send response dict
    """
    html_content = compile_mjml_to_html(mjml_content)

    recipients = [to] if isinstance(to, str) else to
    sender = from_address or config.EMAIL_FROM_ADDRESS

    if config.SMTP_HOST:
        try:
            logger.info(f"📧 Sending email via SMTP: {config.SMTP_HOST}")
            return send_via_smtp(recipients, subject, html_content, sender)
        except Exception as e:
            logger.warning(f"⚠️ SMTP failed, falling back to Resend: {e}")

    if not config.RESEND_API_KEY:
        logger.error("❌ No email service configured - RESEND_API_KEY missing and no SMTP")
        raise Exception("Email service not configured")

    try:
        logger.info(f"📧 Sending email via Resend to: {to}")
        response = resend.Emails.send(
            {
                "from": sender,
                "to": recipients,
                "subject": subject,
                "html": html_content,
            }
        )
        logger.info(f"✅ Email sent successfully via Resend: {response}")
        return response
    except Exception as e:
        logger.error(f"❌ Email send error to {recipients}: {e}")
        raise Exception(f"Failed to send email: {str(e)}") from e


async def send_appointment_confirmation(
    to: str,
    patient_name: str,
    treatment: str,
    date: str,
    slot: str,
) -> dict:
    """Send the appointment confirmation to a patient"""
    mjml_content = appointment_confirmed_template(patient_name, treatment, date, slot)
    return await send_email(
        to=to,
        subject=f"Your Appointment for {treatment} is on {date} at {slot} is Confirmed",
        mjml_content=mjml_content,
    )
