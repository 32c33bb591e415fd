import os

from dotenv import load_dotenv

load_dotenv(os.getenv('TRAVESIA_DOTENV', '.env'))

from app import DEFAULT_HOST, DEFAULT_PORT, NOTION_API_KEY, NOTION_DATABASE_ID, app

if __name__ == '__main__':
    host = os.getenv('HOST', DEFAULT_HOST)
    port = int(os.getenv('PORT', DEFAULT_PORT))
    debug = os.getenv('DEBUG', 'False').lower() == 'true'

    print(f"Starting Travesia on {host}:{port}")
    print("Notion status:")
    print(f"  API key configured: {bool(NOTION_API_KEY)}")
    print(f"  Database configured: {bool(NOTION_DATABASE_ID)}")

    if not (NOTION_API_KEY and NOTION_DATABASE_ID):
        print("\n[WARN] Notion credentials missing; pages will show their empty states.")

    print(f"\nAccess URL: http://{host}:{port}")

    app.run(host=host, port=port, debug=debug, threaded=True)
