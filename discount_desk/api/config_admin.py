from fastapi import APIRouter, Depends, HTTPException, Request

from discount_desk.api.dependencies.admin_auth import require_admin
from discount_desk.config_store import ConfigStore, LoadedConfig, get_config_store
from discount_desk.core.logging_config import logger
from discount_desk.core.rate_limit import limiter
from discount_desk.core.settings import settings
from discount_desk.data_validators.pricing_config import (
    config_warnings,
    normalize_for_persistence,
    parse_draft,
    validate_whole_config,
)
from discount_desk.domain.auth import AdminIdentity
from discount_desk.schemas.config_v1 import ConfigPayloadV1, ConfigRejectedV1, ConfigResponseV1
from discount_desk.storage.remote_store import ConfigStoreError

router = APIRouter(prefix="/api", tags=["config"])


def _response(loaded: LoadedConfig, warnings: list[str] | None = None) -> ConfigResponseV1:
    return ConfigResponseV1(
        config=loaded.config.to_dict(),
        source=loaded.source,
        warnings=warnings or [],
    )


def _save(op: str, save) -> LoadedConfig:
    try:
        loaded = save()
    except ConfigStoreError as e:
        logger.bind(op=op, status_code=e.status_code, detail=e.detail).error("config_save_failed")
        raise HTTPException(status_code=502, detail=e.message)
    logger.bind(op=op, source=loaded.source).info("config_saved")
    return loaded


@router.post("/admin-auth")
@limiter.limit(settings.ADMIN_AUTH_RATE_LIMIT)
def admin_auth(request: Request, admin: AdminIdentity = Depends(require_admin)) -> dict:
    return {"ok": True}


@router.get("/config", response_model=ConfigResponseV1)
def read_config(store: ConfigStore = Depends(get_config_store)) -> ConfigResponseV1:
    return _response(store.get_config())


@router.put("/config", response_model=ConfigResponseV1, responses={400: {"model": ConfigRejectedV1}})
def write_config(
    payload: ConfigPayloadV1,
    admin: AdminIdentity = Depends(require_admin),
    store: ConfigStore = Depends(get_config_store),
) -> ConfigResponseV1:
    if payload.config is None:
        raise HTTPException(status_code=400, detail="Missing config payload.")

    draft = parse_draft(payload.config)
    violations = validate_whole_config(draft)
    if violations:
        logger.bind(violation_count=len(violations)).info("config_draft_rejected")
        raise HTTPException(
            status_code=400,
            detail={"error": "Config is invalid.", "violations": violations},
        )

    normalized = normalize_for_persistence(draft)
    loaded = _save("update", lambda: store.save_config(normalized))
    return _response(loaded, config_warnings(loaded.config))


@router.post("/config/reset", response_model=ConfigResponseV1)
def reset_config(
    admin: AdminIdentity = Depends(require_admin),
    store: ConfigStore = Depends(get_config_store),
) -> ConfigResponseV1:
    loaded = _save("reset", store.restore_defaults)
    return _response(loaded)
