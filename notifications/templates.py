"""HTML bodies for the transactional emails."""
from jinja2 import Environment, StrictUndefined

from config import SITE_URL

_env = Environment(autoescape=True, undefined=StrictUndefined)

CONTACT_REPLY_SUBJECT = "We Received Your Booking Request - JiggerOnTheMix"
NEWSLETTER_WELCOME_SUBJECT = "Welcome to JiggerOnTheMix Newsletter!"

_FOOTER = """
                    <p style="color: #dd0000; font-weight: bold; margin-top: 20px;">
                        JiggerOnTheMix - Premium Mobile Bar Service
                    </p>
                </div>
            </body>
        </html>
"""

CONTACT_REPLY_TEMPLATE = _env.from_string("""
        <html>
            <body style="font-family: Arial, sans-serif; line-height: 1.6; color: #333;">
                <div style="max-width: 600px; margin: 0 auto; background: #f9f9f9; padding: 20px; border-radius: 8px;">
                    <h2 style="color: #dd0000;">Thank You, {{ contact_name }}!</h2>

                    <p>We received your booking request for <strong>{{ event_name }}</strong>.</p>

                    <p>Our team is reviewing your details and will get back to you within 24 hours with a personalized quote and availability.</p>

                    <h3 style="color: #dd0000; margin-top: 30px;">What's Next?</h3>
                    <ul>
                        <li>We'll contact you via email or phone to confirm details</li>
                        <li>We'll provide a custom quote based on your event</li>
                        <li>Once confirmed, we'll send a booking confirmation</li>
                    </ul>

                    <div style="margin: 30px 0; text-align: center;">
                        <a href="{{ site_url }}" style="background: #dd0000; color: white; padding: 12px 30px; text-decoration: none; border-radius: 6px; font-weight: bold; display: inline-block;">Visit Our Website</a>
                    </div>

                    <p style="margin-top: 30px; color: #666; font-size: 12px;">
                        Questions? Contact us at +63 995-551-1748 or jiggeronthemix.atyourservice@gmail.com
                    </p>
""" + _FOOTER)

NEWSLETTER_WELCOME_TEMPLATE = _env.from_string("""
        <html>
            <body style="font-family: Arial, sans-serif; line-height: 1.6; color: #333;">
                <div style="max-width: 600px; margin: 0 auto; background: #f9f9f9; padding: 20px; border-radius: 8px;">
                    <h2 style="color: #dd0000;">Welcome to Our Newsletter!</h2>

                    <p>Thank you for subscribing to JiggerOnTheMix updates, {{ recipient }}.</p>

                    <p>You'll now receive:</p>
                    <ul>
                        <li>Exclusive event package deals</li>
                        <li>New cocktail menu updates</li>
                        <li>Special promotions and discounts</li>
                        <li>Event planning tips from our experts</li>
                    </ul>

                    <div style="margin: 30px 0; text-align: center;">
                        <a href="{{ site_url }}" style="background: #dd0000; color: white; padding: 12px 30px; text-decoration: none; border-radius: 6px; font-weight: bold; display: inline-block;">Explore Our Packages</a>
                    </div>

                    <p style="margin-top: 30px; color: #666; font-size: 12px;">
                        Not interested? You can unsubscribe anytime by replying to this email.
                    </p>
""" + _FOOTER)


def render_contact_reply(contact_name: str, event_name: str) -> str:
    return CONTACT_REPLY_TEMPLATE.render(
        contact_name=contact_name, event_name=event_name, site_url=SITE_URL
    )


def render_newsletter_welcome(recipient: str) -> str:
    return NEWSLETTER_WELCOME_TEMPLATE.render(recipient=recipient, site_url=SITE_URL)
