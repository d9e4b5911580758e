from langchain_core.prompts import PromptTemplate

from opdesk.schemas.ticket_notification import TicketNotification

ADMIN_PANEL_URL = "https://opdesk.app/bookings.html?admin"

# Fields are interpolated as-is, without HTML escaping.
TICKET_EMAIL_HTML = """
    <div style="font-family:Inter,sans-serif;max-width:600px;margin:0 auto;background:#f9fafb;padding:24px;border-radius:12px">
      <div style="background:#0F2540;padding:20px 24px;border-radius:8px;margin-bottom:20px">
        <h2 style="color:#D4A853;margin:0;font-size:18px">&#x1F6A8; New Support Ticket</h2>
        <p style="color:rgba(255,255,255,0.6);margin:4px 0 0;font-size:13px">OpDesk Support System</p>
      </div>
      <table style="width:100%;border-collapse:collapse;background:white;border-radius:8px;overflow:hidden;box-shadow:0 1px 3px rgba(0,0,0,0.1)">
        <tr style="background:#f3f4f6"><td style="padding:10px 16px;font-weight:700;font-size:12px;color:#6b7280;text-transform:uppercase;width:130px">Category</td>
          <td style="padding:10px 16px;font-size:14px;color:#111">{category}</td></tr>
        <tr><td style="padding:10px 16px;font-weight:700;font-size:12px;color:#6b7280;text-transform:uppercase">Subject</td>
          <td style="padding:10px 16px;font-size:14px;color:#111;font-weight:600">{subject}</td></tr>
        <tr style="background:#f3f4f6"><td style="padding:10px 16px;font-weight:700;font-size:12px;color:#6b7280;text-transform:uppercase">Company</td>
          <td style="padding:10px 16px;font-size:14px;color:#111">{company_name}</td></tr>
        <tr><td style="padding:10px 16px;font-weight:700;font-size:12px;color:#6b7280;text-transform:uppercase">From</td>
          <td style="padding:10px 16px;font-size:14px;color:#111">{submitter_email}</td></tr>
        <tr style="background:#f3f4f6"><td style="padding:10px 16px;font-weight:700;font-size:12px;color:#6b7280;text-transform:uppercase;vertical-align:top">Details</td>
          <td style="padding:10px 16px;font-size:14px;color:#374151;white-space:pre-wrap;line-height:1.6">{description}</td></tr>
      </table>
      <div style="margin-top:20px;text-align:center">
        <a href="{admin_url}" style="background:#dc2626;color:white;padding:10px 24px;border-radius:8px;text-decoration:none;font-weight:700;font-size:14px">
          View in Admin Panel
        </a>
      </div>
      <p style="margin-top:20px;font-size:11px;color:#9ca3af;text-align:center">OpDesk by RollingRover Productions · Ticket ID: {ticket_id}</p>
    </div>
  """

TICKET_EMAIL_SUBJECT = """[OpDesk Support] {category}: {subject}"""

ticket_email_html = PromptTemplate.from_template(TICKET_EMAIL_HTML)

ticket_email_subject_line = PromptTemplate.from_template(TICKET_EMAIL_SUBJECT)


def render_ticket_email(ticket: TicketNotification) -> str:
    return ticket_email_html.format(
        category=ticket.category or "",
        subject=ticket.subject or "",
        company_name=ticket.company_name or "Unknown",
        submitter_email=ticket.submitter_email or "Unknown",
        description=ticket.description or "",
        ticket_id=ticket.ticket_id or "N/A",
        admin_url=ADMIN_PANEL_URL,
    )


def ticket_email_subject(ticket: TicketNotification) -> str:
    return ticket_email_subject_line.format(
        category=ticket.category or "",
        subject=ticket.subject or "",
    )
