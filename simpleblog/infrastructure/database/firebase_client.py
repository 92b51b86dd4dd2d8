"""Firestore 클라이언트 생성.

firebase-admin 앱을 한 번만 초기화하고 Firestore 클라이언트를 돌려준다.
서비스 계정 키 JSON이 없으면 ADC(GOOGLE_APPLICATION_CREDENTIALS)로 인증.
"""

from __future__ import annotations

import logging
from pathlib import Path

import firebase_admin
from firebase_admin import credentials, firestore
from google.auth.exceptions import DefaultCredentialsError

from simpleblog.domain.exceptions import UpstreamUnavailableError

logger = logging.getLogger(__name__)


def _credential(credential_path: str | None):
    if credential_path and Path(credential_path).exists():
        return credentials.Certificate(credential_path)
    logger.info("서비스 계정 키 없음: Application Default Credentials 사용")
    return credentials.ApplicationDefault()


def create_firestore_client(
    credential_path: str | None = None,
    project_id: str | None = None,
):
    """Firestore 클라이언트 반환. 인증 실패 시 UpstreamUnavailableError."""
    try:
        app = firebase_admin.get_app()
    except ValueError:
        options = {"projectId": project_id} if project_id else {}
        try:
            app = firebase_admin.initialize_app(_credential(credential_path), options)
        except (DefaultCredentialsError, ValueError) as e:
            raise UpstreamUnavailableError(f"Firebase 초기화 실패: {e}") from e
        logger.info(f"Firebase 앱 초기화 완료 (project={app.project_id or 'default'})")

    try:
        return firestore.client(app)
    except (DefaultCredentialsError, ValueError) as e:
        raise UpstreamUnavailableError(f"Firestore 클라이언트 생성 실패: {e}") from e
