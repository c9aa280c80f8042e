"""
Document object storage service
"""

import boto3
from botocore.exceptions import BotoCoreError, ClientError
from flask import current_app
from clearance.utils.exceptions import StorageError
from clearance.utils.helpers import log_warning, log_info


class StorageService:
    """Object storage service class (AWS S3)"""

    @staticmethod
    def _get_s3_client():
        """Get AWS S3 client with proper configuration"""
        return boto3.client(
            's3',
            aws_access_key_id=current_app.config.get('AWS_ACCESS_KEY_ID'),
            aws_secret_access_key=current_app.config.get('AWS_SECRET_ACCESS_KEY'),
            region_name=current_app.config.get('AWS_REGION', 'ap-southeast-2')
        )

    @staticmethod
    def delete_object(public_id: str) -> None:
        """
        Delete a stored document

        Args:
            public_id: Object key of the document

        Raises:
            StorageError: If storage is not configured or the deletion fails
        """
        bucket_name = current_app.config.get('S3_BUCKET_NAME')
        if not bucket_name:
            raise StorageError("Document storage is not configured")

        try:
            s3_client = StorageService._get_s3_client()
            s3_client.delete_object(Bucket=bucket_name, Key=public_id)
        except (ClientError, BotoCoreError) as e:
            raise StorageError(f"S3 delete error: {e}") from e

    @staticmethod
    def try_delete_object(public_id: str) -> bool:
        """
        Delete a stored document, logging instead of raising on failure

        Returns:
            True if the object was deleted
        """
        try:
            StorageService.delete_object(public_id)
        except StorageError as e:
            log_warning(f"Could not delete stored document {public_id}: {e}")
            return False

        log_info(f"Deleted stored document {public_id}")
        return True
