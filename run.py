"""Local development entry point.

Usage:
    python run.py

Reads settings from .env (SITE_URL, RESEND_API_KEY, EMAIL_FROM, EMAIL_TO, ...).
Without RESEND_API_KEY the contact form still answers, but only logs
submissions instead of emailing them.
"""

from dotenv import load_dotenv

load_dotenv()  # Load .env before anything else

from portfolio import create_app  # noqa: E402

app = create_app()

if __name__ == "__main__":
    app.run(debug=True, host="0.0.0.0", port=5001)
