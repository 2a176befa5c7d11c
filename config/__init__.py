import os

def get_settings_module() -> str:
    # Chọn môi trường từ APP_ENV; NODE_ENV=production vẫn được hiểu là production
    env = os.getenv("APP_ENV") or os.getenv("NODE_ENV") or "development"
    env = env.lower()

    # 1. Production
    if env in {"prod", "production"}:
        return "config.production"

    # 2. Testing
    if env in {"test", "testing"}:
        return "config.testing"

    # 3. Mặc định: Development
    return "config.development"
