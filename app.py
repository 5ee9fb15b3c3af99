#!/usr/bin/env python3
import aws_cdk as core

from infrastructure.main import ImageResizeStack

app = core.App()

ImageResizeStack(
    app,
    "ImageResizeStack",
    source_bucket_name=app.node.try_get_context("source_bucket_name") or "image-uploads",
)

app.synth()
