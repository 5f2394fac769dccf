from aws_cdk import (
    Stack,
    Duration,
    aws_lambda as _lambda,
    aws_lambda_python_alpha as lambda_py,
    aws_apigatewayv2 as apigwv2,
    aws_apigatewayv2_integrations as apigwv2_integrations,
    aws_iam as iam,
    CfnOutput,
)
from constructs import Construct
import os

GREETING_LAMBDA_PATH = os.path.join(
    os.path.dirname(os.path.abspath(__file__)), "..", "aws", "lambdas", "greeting"
)


class GreetingStack(Stack):
    """CDK stack that deploys the Singapore greeting Lambda behind a single
    ``GET /greeting`` route on an HTTP API.

    ``bundle`` switches between a ``PythonFunction`` (which installs the
    function's requirements.txt inside a Docker build container) and a plain
    ``Function`` built straight from the source directory.
    """

    def __init__(self, scope: Construct, construct_id: str, *, bundle: bool = True, **kwargs):
        super().__init__(scope, construct_id, **kwargs)

        # ──────────────────────────────────────────────────────────────
        # Environment variables (set in cdk.json or your shell)
        # ──────────────────────────────────────────────────────────────
        log_level = os.environ.get("LOG_LEVEL", "INFO")

        # ──────────────────────────────────────────────────────────────
        # IAM Role
        # ──────────────────────────────────────────────────────────────
        lambda_role = iam.Role(
            self,
            "LambdaExecRole",
            assumed_by=iam.ServicePrincipal("lambda.amazonaws.com"),
            managed_policies=[
                iam.ManagedPolicy.from_aws_managed_policy_name("service-role/AWSLambdaBasicExecutionRole"),
            ],
        )

        # ──────────────────────────────────────────────────────────────
        # Lambda Function
        # ──────────────────────────────────────────────────────────────
        function_props = dict(
            runtime=_lambda.Runtime.PYTHON_3_12,
            role=lambda_role,
            timeout=Duration.seconds(10),
            memory_size=128,
            environment={"LOG_LEVEL": log_level},
        )
        if bundle:
            greeting_fn = lambda_py.PythonFunction(
                self,
                "GreetingLambda",
                entry=GREETING_LAMBDA_PATH,
                index="main.py",
                handler="handler",
                **function_props,
            )
        else:
            greeting_fn = _lambda.Function(
                self,
                "GreetingLambda",
                code=_lambda.Code.from_asset(GREETING_LAMBDA_PATH),
                handler="main.handler",
                **function_props,
            )

        # ──────────────────────────────────────────────────────────────
        # HTTP API Gateway
        # ──────────────────────────────────────────────────────────────
        http_api = apigwv2.HttpApi(self, "ServerlessHttpApi")

        integration = apigwv2_integrations.HttpLambdaIntegration(
            "GreetingIntegration", handler=greeting_fn
        )
        http_api.add_routes(
            path="/greeting",
            methods=[apigwv2.HttpMethod.GET],
            integration=integration,
        )

        self.function = greeting_fn
        self.http_api = http_api

        CfnOutput(self, "ApiBaseUrl", value=http_api.api_endpoint)
        CfnOutput(self, "GreetingFunctionName", value=greeting_fn.function_name)
