import os

from aws_cdk import App, Aspects, Environment, Tags
from cdk_nag import AwsSolutionsChecks

from constants import ENV_CONFIG, LAMBDA_ASSET_PATH, PREFIX, SITE_ASSET_PATH, SITE_CONFIG
from layered_constructs.app_stack import AppStack
from layered_constructs.models import StaticSiteConstructProps

app = App()

stage = os.getenv("ENV", "dev")
config = ENV_CONFIG.get(stage)

# Ensure config exists for the specified environment
if config is None:
    raise ValueError(f"Environment '{stage}' is not defined in constants.py")

# Define the environment
account = config["account"]
region = config["region"]

environment = Environment(account=account, region=region)

site = None
if SITE_CONFIG["domain_name"]:
    site = StaticSiteConstructProps(asset_path=SITE_ASSET_PATH, **SITE_CONFIG)

# Create the main application stack
app_stack = AppStack(
    app,
    f"app-{stage}",
    stage=stage,
    table_name=PREFIX,
    lambda_asset_path=LAMBDA_ASSET_PATH,
    site=site,
    env=environment,
)

# Add tags to all resources
Tags.of(app).add("Environment", stage)
Tags.of(app).add("Project", PREFIX)

# Add cdk-nag checks
Aspects.of(app).add(AwsSolutionsChecks())

app.synth()
