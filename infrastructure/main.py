from typing import Text

import aws_cdk as core
from aws_cdk import aws_lambda, aws_s3, aws_s3_notifications
from constructs import Construct

from image_resize.config import ResizeConfig
from infrastructure.utils import (
    build_path_to_lambdas,
    python_312_function_bundling_options,
)

RESIZE_CONFIG = ResizeConfig()


class ImageResizeStack(core.Stack):
    def __init__(
        self, scope: Construct, id: Text, source_bucket_name: Text, **kwargs
    ) -> None:
        super().__init__(scope, id, **kwargs)

        # Bucket where images are uploaded, and where their resized copy lands
        source_bucket = aws_s3.Bucket(
            self,
            "uploaded-image",
            bucket_name=source_bucket_name,
            removal_policy=core.RemovalPolicy.DESTROY,
        )
        resized_bucket = aws_s3.Bucket(
            self,
            "resized-image",
            bucket_name=RESIZE_CONFIG.destination_bucket(source_bucket_name),
            removal_policy=core.RemovalPolicy.DESTROY,
        )

        resize_code = aws_lambda.Code.from_asset(
            path=build_path_to_lambdas("resize"),
            bundling=python_312_function_bundling_options,
        )
        resize_function = aws_lambda.Function(
            self,
            "ImageResize",
            code=resize_code,
            handler="image_resize.handler.handler",
            runtime=aws_lambda.Runtime.PYTHON_3_12,
            environment={"LOG_LEVEL": "INFO"},
            memory_size=512,
            timeout=core.Duration.minutes(amount=1),
        )
        source_bucket.grant_read(resize_function)
        source_bucket.grant_delete(resize_function)
        resized_bucket.grant_put(resize_function)

        # One notification per suffix, S3 filters can't express alternatives
        for extension in RESIZE_CONFIG.allowed_extensions:
            source_bucket.add_event_notification(
                aws_s3.EventType.OBJECT_CREATED,
                aws_s3_notifications.LambdaDestination(resize_function),
                aws_s3.NotificationKeyFilter(suffix=extension),
            )

        core.CfnOutput(self, "SourceBucket", value=source_bucket.bucket_name)
        core.CfnOutput(self, "ResizedBucket", value=resized_bucket.bucket_name)
