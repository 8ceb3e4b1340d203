"""Lucent System Health Check"""
print("=" * 60)
print("LUCENT SYSTEM HEALTH CHECK")
print("=" * 60)

errors = []
warnings = []

# 1. Core Imports
try:
    from lucent_service.app.main import app
    print("[OK] FastAPI app loads")
except Exception as e:
    errors.append(f"FastAPI app: {e}")
    print(f"[FAIL] FastAPI app: {e}")

# 2. Routes
try:
    from lucent_service.app.routes import router
    print(f"[OK] API routes load ({len(router.routes)} routes)")
except Exception as e:
    errors.append(f"Routes: {e}")
    print(f"[FAIL] Routes: {e}")

# 3. Analysis contract
try:
    from lucent_service.core.contract import FEATURES
    print(f"[OK] Analysis features: {', '.join(sorted(FEATURES))}")
except Exception as e:
    errors.append(f"Contract: {e}")
    print(f"[FAIL] Contract: {e}")

# 4. Cadence table
try:
    from lucent_service.core.cadence import recommend, Mood
    for mood in Mood:
        for score in (0, 50, 100):
            recommend(mood, score)
    print("[OK] Cadence table complete (3 moods x 3 levels)")
except Exception as e:
    errors.append(f"Cadence: {e}")
    print(f"[FAIL] Cadence: {e}")

# 5. Config
try:
    from lucent_service.config import get_settings, get_all_configs_dict
    settings = get_settings()
    configs = get_all_configs_dict()
    print(f"[OK] Config loads (analyst={configs['analyst']['provider']}, image={configs['image']['provider']})")
except Exception as e:
    errors.append(f"Config: {e}")
    print(f"[FAIL] Config: {e}")

# 6. Provider keys (optional for local checks)
try:
    from lucent_service.config import is_role_configured, LLMRole
    for role in LLMRole:
        if is_role_configured(role):
            print(f"[OK] {role.value} provider key present")
        else:
            warnings.append(f"{role.value} provider key missing")
            print(f"[WARN] {role.value} provider key missing")
except Exception as e:
    warnings.append(f"Provider keys: {e}")
    print(f"[WARN] Provider keys: {e}")

print("")
print("=" * 60)
print("SUMMARY")
print("=" * 60)
print(f"Errors:   {len(errors)}")
print(f"Warnings: {len(warnings)}")
if len(errors) == 0:
    print("")
    print(">>> SYSTEM READY TO RUN <<<")
else:
    print("")
    print(">>> SYSTEM HAS ERRORS <<<")
    for e in errors:
        print(f"  - {e}")
