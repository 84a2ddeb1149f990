"""
Newsletter Routes - Subscription form processing
"""

import re
from markupsafe import escape
from flask import redirect, url_for, request, flash, current_app
from sqlalchemy.exc import SQLAlchemyError
import content
from extensions import db
from models import Subscriber
from utils.decorators import display_required
from utils.security import check_rate_limit, get_client_ip
from utils.notifications import send_telegram_notification
from . import newsletter_bp


EMAIL_RE = re.compile(r'^[^@\s]+@[^@\s]+\.[^@\s]+$')


@newsletter_bp.route('/subscribe', methods=['POST'])
@display_required(lambda: content.newsletter)
def subscribe():
    """Newsletter subscription - saves the address to the database"""
    back = request.referrer or url_for('pages.home')

    # Honeypot spam protection
    if request.form.get('website'):
        return redirect(back)

    if not check_rate_limit('newsletter'):
        flash('Too many requests.', 'danger')
        return redirect(back)

    email = request.form.get('email', '').strip().lower()
    if not EMAIL_RE.match(email) or len(email) > 255:
        flash('Please enter a valid email address.', 'danger')
        return redirect(back)

    if Subscriber.query.filter_by(email=email).first():
        flash('You are already subscribed.', 'info')
        return redirect(back)

    try:
        subscriber = Subscriber(email=email, ip_address=get_client_ip())
        db.session.add(subscriber)
        db.session.commit()
    except SQLAlchemyError as e:
        current_app.logger.error(f"Newsletter subscription error: {str(e)}")
        db.session.rollback()
        flash('Error saving your subscription. Please try again.', 'danger')
        return redirect(back)

    current_app.logger.info(f"New newsletter subscriber, id: {subscriber.id}")
    send_telegram_notification(f"📬 <b>New Newsletter Subscriber</b>\n\n📧 <b>Email:</b> {escape(email)}")

    flash('Thanks for subscribing!', 'success')
    return redirect(back)
