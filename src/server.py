"""HTTPサーバー（FastAPI）"""
from typing import Any, Optional

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field

from .features.app.container import AppContainer
from .features.location.domain.models import LocationInput
from .features.location.domain.results import LoadStatus
from .features.storage.domain.ports import KeyValueStorage
from .infrastructure.config.settings import Settings
from .shared.exceptions.errors import ValidationError
from .shared.logging.config import get_logger, setup_logging

logger = get_logger(__name__)


class LocationPayload(BaseModel):
    """ロケーション保存リクエスト"""

    model_config = ConfigDict(populate_by_name=True)

    description: str = Field(..., min_length=1, description="表示用の地名")
    place_id: str = Field(..., min_length=1, alias="placeId", description="Place ID")
    latitude: Optional[float] = Field(default=None, description="緯度")
    longitude: Optional[float] = Field(default=None, description="経度")


def create_app(
    settings: Optional[Settings] = None,
    storage: Optional[KeyValueStorage] = None,
) -> FastAPI:
    """
    FastAPIアプリケーションを作成

    Args:
        settings: アプリケーション設定（省略時は環境変数から読み込み）
        storage: 使用するストレージ（省略時は設定から生成）

    Returns:
        FastAPI: アプリケーション
    """
    settings = settings or Settings()
    container = AppContainer(settings, storage=storage)

    app = FastAPI(
        title="HelpKey クライアントキャッシュサービス",
        description="選択中ロケーションとホテル一覧のキャッシュを管理するサービス",
        version="1.0.0",
    )
    app.state.container = container

    @app.on_event("startup")
    async def startup_event() -> None:
        """起動時の処理"""
        logger.info("Application starting up")
        logger.info(f"Environment: {settings.environment}")
        logger.info(f"Storage backend: {settings.storage_backend}")

    @app.on_event("shutdown")
    async def shutdown_event() -> None:
        """シャットダウン時の処理"""
        logger.info("Application shutting down")

    @app.get("/health")
    async def health() -> dict[str, str]:
        """ヘルスチェックエンドポイント"""
        return {"status": "healthy"}

    @app.get("/location")
    async def get_location() -> dict[str, Any]:
        """保存済みロケーションを取得"""
        cache = container.location_cache
        result = await cache.load_result()

        if result.status is LoadStatus.ABSENT:
            raise HTTPException(status_code=404, detail="No location stored")
        if not result.found:
            raise HTTPException(
                status_code=500,
                detail=f"Stored location unavailable ({result.status.value}): {result.error}",
            )

        location = result.location
        return {
            "location": location.to_storage_dict(),
            "is_recent": cache.is_recent(location),
            "age_ms": cache.age_ms(location),
        }

    @app.put("/location")
    async def put_location(payload: LocationPayload) -> dict[str, Any]:
        """ロケーションを保存"""
        try:
            location = LocationInput(
                description=payload.description,
                place_id=payload.place_id,
                latitude=payload.latitude,
                longitude=payload.longitude,
            )
        except ValidationError as e:
            raise HTTPException(status_code=422, detail=str(e))

        result = await container.location_cache.save_result(location)
        if not result.ok:
            raise HTTPException(
                status_code=500, detail=f"Failed to save location: {result.error}"
            )

        return {"status": "saved", "placeId": location.place_id}

    @app.delete("/location")
    async def delete_location() -> dict[str, str]:
        """保存済みロケーションを削除"""
        result = await container.location_cache.clear_result()
        if not result.ok:
            raise HTTPException(
                status_code=500, detail=f"Failed to clear location: {result.error}"
            )
        return {"status": "cleared"}

    @app.get("/hotels/cache")
    async def get_hotel_cache() -> dict[str, Any]:
        """ホテル一覧キャッシュの状態を取得"""
        hotels = await container.hotel_cache.get_hotels()
        return {
            "valid": hotels is not None,
            "hotels": [hotel.to_dict() for hotel in hotels or []],
        }

    @app.delete("/hotels/cache")
    async def delete_hotel_cache() -> dict[str, str]:
        """ホテル一覧キャッシュを削除"""
        await container.hotel_cache.clear()
        return {"status": "cleared"}

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        """グローバル例外ハンドラー"""
        logger.error(f"Unhandled exception: {exc}", exc_info=True)
        return JSONResponse(
            status_code=500,
            content={"message": "Internal server error", "detail": str(exc)},
        )

    return app


if __name__ == "__main__":
    import uvicorn

    # 設定を読み込み
    settings = Settings()

    # ロギングを設定
    setup_logging(
        level=settings.log_level,
        enable_cloud_logging=settings.gcp_logging_enabled,
        project_id=settings.gcp_project_id,
    )

    uvicorn.run(
        create_app(settings),
        host="0.0.0.0",
        port=settings.port,
        log_level=settings.log_level.lower(),
    )
