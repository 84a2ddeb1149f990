"""
Notifications Module - Telegram notice to the site owner
"""

import requests
from flask import current_app


def get_telegram_credentials():
    """
    Get the site owner's Telegram credentials from config

    Returns:
        tuple: (bot_token, chat_id) or (None, None) if not configured
    """
    bot_token = current_app.config.get('SITE_TELEGRAM_BOT_TOKEN')
    chat_id = current_app.config.get('SITE_TELEGRAM_CHAT_ID')
    if bot_token and chat_id:
        return bot_token, chat_id
    return None, None


def send_telegram_notification(message_text):
    """
    Send a Telegram message to the site owner

    Args:
        message_text (str): Message to send (HTML parse mode)

    Returns:
        bool: True if sent successfully, False otherwise
    """
    bot_token, chat_id = get_telegram_credentials()

    if not (bot_token and chat_id):
        current_app.logger.debug("No Telegram credentials configured, skipping notification")
        return False

    try:
        url = f"https://api.telegram.org/bot{bot_token}/sendMessage"
        payload = {
            'chat_id': chat_id,
            'text': message_text,
            'parse_mode': 'HTML'
        }
        response = requests.post(url, json=payload, timeout=10)
        if response.status_code == 200:
            current_app.logger.info("Telegram notification sent")
            return True
        current_app.logger.error(f"Telegram API error: {response.status_code}")
        return False
    except requests.RequestException as e:
        current_app.logger.error(f"Telegram notification error: {str(e)}")
        return False


__all__ = ['get_telegram_credentials', 'send_telegram_notification']
