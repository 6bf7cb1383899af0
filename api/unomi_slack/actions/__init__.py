from unomi_slack.actions.slack_message import SlackMessageAction

__all__ = ["SlackMessageAction"]
