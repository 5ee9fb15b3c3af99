import os

import aws_cdk as core
from aws_cdk import aws_lambda


def build_path_to_lambdas(path):
    return os.path.join("lambdas", path)


python_312_function_bundling_options = core.BundlingOptions(
    image=aws_lambda.Runtime.PYTHON_3_12.bundling_image,
    command=[
        "bash",
        "-c",
        "\n        pip install -r requirements.txt -t /asset-output &&\n        cp -au . /asset-output\n        ",
    ],
)
