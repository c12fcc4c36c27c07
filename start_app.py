import os

from dotenv import load_dotenv

load_dotenv(os.getenv("PULSE_DOTENV", ".env"))

from app import DEFAULT_HOST, DEFAULT_PORT, app  # noqa: E402
from app_utils import get_bool_env, get_env  # noqa: E402

if __name__ == "__main__":
    host = get_env("HOST", DEFAULT_HOST)
    port = int(get_env("PORT", str(DEFAULT_PORT)))
    debug = get_bool_env("DEBUG", False)

    print(f"Reddit Competitive Intelligence API starting on {host}:{port}")
    print(f"  Profile: {get_env('PULSE_PROFILE', 'standard')}")
    print(f"\nAnalysis URL: http://{host}:{port}/api/analyze")

    app.run(host=host, port=port, debug=debug, threaded=True)
