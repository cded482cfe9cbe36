"""
AWS error handling utilities for registry-service
"""
from typing import Dict, Any
from botocore.exceptions import ClientError, BotoCoreError
from pynamodb.exceptions import (
    PynamoDBException, DoesNotExist, GetError, QueryError,
    UpdateError, DeleteError, PutError, TransactWriteError
)
from .constants import HTTPConstants
from .exceptions import DynamoDBError
from .logger import logger


class AWSErrorHandler:
    """
    Centralized AWS error handling for registry-service
    """

    @staticmethod
    def handle_dynamodb_error(error: Exception, operation: str, table_name: str = None) -> Dict[str, Any]:
        """
        Handle DynamoDB-related errors

        Args:
            error: The exception that occurred
            operation: The operation being performed
            table_name: Optional table name for context

        Returns:
            Standardized error response
        """
        error_context = {
            'operation': operation,
            'table_name': table_name or 'unknown',
            'error_type': type(error).__name__,
            'error_message': str(error)
        }

        if isinstance(error, DoesNotExist):
            logger.warning("DynamoDB item not found", **error_context)
            return {
                'success': False,
                'error_type': 'NotFound',
                'error_message': 'The requested item was not found',
                'status_code': HTTPConstants.NOT_FOUND,
                'retryable': False
            }

        elif isinstance(error, TransactWriteError):
            logger.warning(f"DynamoDB transaction cancelled: {operation}", **error_context)
            return {
                'success': False,
                'error_type': 'TransactionCancelled',
                'error_message': f'Database transaction was cancelled: {operation}',
                'status_code': HTTPConstants.CONFLICT,
                'retryable': False
            }

        elif isinstance(error, (GetError, QueryError, UpdateError, DeleteError, PutError)):
            logger.error(f"DynamoDB operation failed: {operation}", error=error, **error_context)
            return {
                'success': False,
                'error_type': 'DatabaseError',
                'error_message': f'Database operation failed: {operation}',
                'status_code': HTTPConstants.INTERNAL_SERVER_ERROR,
                'retryable': True
            }

        elif isinstance(error, PynamoDBException):
            logger.error("PynamoDB error occurred", error=error, **error_context)
            return {
                'success': False,
                'error_type': 'DatabaseError',
                'error_message': 'Database operation failed',
                'status_code': HTTPConstants.INTERNAL_SERVER_ERROR,
                'retryable': True
            }

        elif isinstance(error, ClientError):
            error_code = error.response.get('Error', {}).get('Code', 'Unknown')
            error_context['aws_error_code'] = error_code

            logger.error("DynamoDB ClientError", error=error, **error_context)

            if error_code in ['ThrottlingException', 'ProvisionedThroughputExceededException']:
                return {
                    'success': False,
                    'error_type': 'ThrottlingError',
                    'error_message': 'Database is temporarily busy. Please try again.',
                    'status_code': HTTPConstants.TOO_MANY_REQUESTS,
                    'retryable': True
                }
            elif error_code == 'ResourceNotFoundException':
                return {
                    'success': False,
                    'error_type': 'ResourceNotFound',
                    'error_message': 'Database resource not found',
                    'status_code': HTTPConstants.NOT_FOUND,
                    'retryable': False
                }
            else:
                return {
                    'success': False,
                    'error_type': 'AWSError',
                    'error_message': f'AWS error: {error_code}',
                    'status_code': HTTPConstants.INTERNAL_SERVER_ERROR,
                    'retryable': True
                }

        elif isinstance(error, BotoCoreError):
            logger.error("DynamoDB connection error", error=error, **error_context)
            return {
                'success': False,
                'error_type': 'ConnectionError',
                'error_message': 'Could not reach the database',
                'status_code': HTTPConstants.SERVICE_UNAVAILABLE,
                'retryable': True
            }

        else:
            logger.error("Unexpected database error", error=error, **error_context)
            return {
                'success': False,
                'error_type': 'DatabaseError',
                'error_message': 'Unexpected database error occurred',
                'status_code': HTTPConstants.INTERNAL_SERVER_ERROR,
                'retryable': False
            }

    def to_dynamodb_error(self, error: Exception, operation: str, table_name: str = None) -> DynamoDBError:
        """
        Classify a storage failure and wrap it for propagation

        Args:
            error: The exception that occurred
            operation: The operation being performed
            table_name: Optional table name for context

        Returns:
            DynamoDBError carrying the classified message
        """
        error_response = self.handle_dynamodb_error(error, operation, table_name)
        return DynamoDBError(
            error_response['error_message'],
            operation=operation,
            table=table_name,
            original_error=str(error),
            retryable=error_response['retryable']
        )

    @staticmethod
    def handle_validation_error(error: Exception, field_name: str = None) -> Dict[str, Any]:
        """
        Handle validation errors

        Args:
            error: The exception that occurred
            field_name: Optional field name for context

        Returns:
            Standardized error response
        """
        error_context = {
            'field_name': field_name or 'unknown',
            'error_type': type(error).__name__,
            'error_message': str(error)
        }

        logger.info("Validation error", **error_context)

        return {
            'success': False,
            'error_type': 'ValidationError',
            'error_message': str(error),
            'status_code': HTTPConstants.BAD_REQUEST,
            'retryable': False,
            'field': field_name
        }


# Global error handler instance
error_handler = AWSErrorHandler()
