#!/usr/bin/env python3
"""
Responder Telegram Bot

Answers every message from the keyword responder:
  Known keyword → canned response
  Anything else → random default response

Commands:
  /start  - Welcome message
  /status - Show what the responder loaded

Usage:
  TELEGRAM_BOT_TOKEN=your_token python -m bot.telegram_bot
  (RESPONDER_CONFIG selects the YAML config, default config/responder.defaults.yml)
"""

import logging
import os
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from telegram import Update
from telegram.ext import (
    Application,
    CommandHandler,
    MessageHandler,
    filters,
    ContextTypes,
)

from responder.config import load_config
from responder.input_reader import tokenize
from responder.responder import Responder

logger = logging.getLogger(__name__)

# Telegram has a 4096 char limit per message
MAX_MESSAGE_CHARS = 4000


def chunk_response(response: str, size: int = MAX_MESSAGE_CHARS) -> list:
    """Split a reply into Telegram-sized pieces."""
    return [response[i:i + size] for i in range(0, len(response), size)] or [response]


class ResponderBot:
    """Telegram handlers bound to one Responder instance."""

    def __init__(self, responder: Responder):
        self.responder = responder

    async def start_command(self, update: Update, context: ContextTypes.DEFAULT_TYPE):
        """Handle /start command."""
        await update.message.reply_text(
            "Welcome to the Technical Support System. "
            "Tell me about your problem.\n\n"
            "Commands:\n"
            "/status - Show loaded responses"
        )

    async def status_command(self, update: Update, context: ContextTypes.DEFAULT_TYPE):
        """Handle /status command."""
        await update.message.reply_text(self.responder.get_status())

    async def handle_message(self, update: Update, context: ContextTypes.DEFAULT_TYPE):
        """Handle any text message and answer from the responder."""
        message = update.message.text
        if not message:
            return

        user_id = str(update.effective_user.id)
        logger.info("Message from %s: %s", user_id, message[:100])

        response = self.responder.generate_response(tokenize(message))
        for chunk in chunk_response(response):
            await update.message.reply_text(chunk)

    def build_application(self, token: str) -> Application:
        app = Application.builder().token(token).build()

        # Commands
        app.add_handler(CommandHandler("start", self.start_command))
        app.add_handler(CommandHandler("status", self.status_command))

        # All text messages
        app.add_handler(MessageHandler(filters.TEXT & ~filters.COMMAND, self.handle_message))
        return app


def main():
    """Start the bot."""
    logging.basicConfig(
        format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
        level=logging.INFO,
    )

    token = os.environ.get("TELEGRAM_BOT_TOKEN")
    if not token:
        logger.error("TELEGRAM_BOT_TOKEN not set")
        sys.exit(1)

    config = load_config(os.environ.get("RESPONDER_CONFIG", "config/responder.defaults.yml"))
    bot = ResponderBot(Responder(config))

    logger.info("Starting responder Telegram bot...")
    logger.info("Responder status:\n%s", bot.responder.get_status())

    app = bot.build_application(token)

    # Start polling
    logger.info("Bot is running. Polling for messages...")
    app.run_polling(allowed_updates=Update.ALL_TYPES)


if __name__ == "__main__":
    main()
