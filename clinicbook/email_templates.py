"""
MJML Email Templates
Patient-facing emails, compiled to HTML by email_service
"""

from html import escape
from typing import Optional

from .config import CLINIC_NAME, FRONTEND_URL

# Clinic theme colors - Teal/Slate color scheme
THEME = {
    "primary": "#0fcfec",
    "primary_dark": "#19d3ae",
    "background": "#f8fafc",
    "text_primary": "#0f172a",
    "text_secondary": "#334155",
    "text_muted": "#64748b",
    "border": "#e2e8f0",
    "success": "#14b8a6",
}


def get_base_template(
    title: str,
    preview_text: str,
    content_sections: str,
    cta_url: Optional[str] = None,
    cta_label: Optional[str] = None,
) -> str:
    """Base MJML template wrapper for all emails"""

    cta_section = ""
    if cta_url and cta_label:
        cta_section = f"""
        <mj-section padding="20px 0">
          <mj-column>
            <mj-button
              href="{cta_url}"
              background-color="{THEME['primary']}"
              color="#ffffff"
              font-weight="600"
              border-radius="8px"
              padding="18px 40px"
              font-size="16px">
              {cta_label}
            </mj-button>
          </mj-column>
        </mj-section>
        """

    return f"""
    <mjml>
      <mj-head>
        <mj-title>{title}</mj-title>
        <mj-preview>{preview_text}</mj-preview>
        <mj-attributes>
          <mj-all font-family="-apple-system, BlinkMacSystemFont, 'Segoe UI', 'Helvetica Neue', Arial, sans-serif" />
          <mj-text font-size="16px" line-height="1.6" color="{THEME['text_secondary']}" />
        </mj-attributes>
      </mj-head>
      <mj-body background-color="{THEME['background']}">
        <mj-section background-color="#ffffff" padding="32px 40px 48px 40px">
          <mj-column>
            <mj-text font-size="24px" font-weight="600" color="{THEME['text_primary']}" line-height="1.3" padding="0 0 16px 0">
              {title}
            </mj-text>

            {content_sections}
          </mj-column>
        </mj-section>

        {cta_section}

        <mj-section padding="32px 20px">
          <mj-column>
            <mj-text align="center" font-size="13px" color="#94a3b8" padding="0">
              {CLINIC_NAME}
            </mj-text>
          </mj-column>
        </mj-section>
      </mj-body>
    </mjml>
    """


def appointment_confirmed_template(
    patient_name: str,
    treatment: str,
    date: str,
    slot: str,
) -> str:
    """Appointment confirmation for the patient"""
    content = f"""
    <mj-text>
      Hello {escape(patient_name)},
    </mj-text>

    <mj-text>
      Your appointment for <strong>{escape(treatment)}</strong> is confirmed.
    </mj-text>

    <mj-text align="center" font-size="16px" color="{THEME['text_primary']}" padding="20px 0 0 0">
      📅 {escape(date)}
    </mj-text>

    <mj-text align="center" font-size="16px" color="{THEME['text_primary']}" padding="0 0 20px 0">
      ⏰ {escape(slot)}
    </mj-text>

    <mj-text color="{THEME['text_muted']}">
      Looking forward to seeing you on {escape(date)} at {escape(slot)}.
    </mj-text>
    """

    return get_base_template(
        title="Your Appointment is Confirmed",
        preview_text=f"{treatment} on {date} at {slot}",
        content_sections=content,
        cta_url=f"{FRONTEND_URL}/dashboard",
        cta_label="View My Appointments",
    )
