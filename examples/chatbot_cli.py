from __future__ import annotations

import json

from unichat import ChatClient, ChatClientConfig, UniChatError
from unichat.utils.logger import setup_logger


def main():
    logger = setup_logger("unichat.chat")
    settings = ChatClientConfig.from_env()
    settings.validate()
    client = ChatClient.from_config(settings, logger=logger)
    options = {}

    print(f"Chatbot ready on {client.kind.value}. Type /quit to exit. Examples:")
    print("  /switch local")
    print("  /model gpt-4o-mini")
    print("  /config")

    while True:
        user_input = input("you> ").strip()
        if user_input.lower() in {"/quit", "quit", "exit"}:
            break
        if not user_input:
            continue

        try:
            if user_input.startswith("/switch "):
                client.switch_to(user_input[8:].strip(), settings)
                options.pop("model", None)
                response = f"now using {client.kind.value} ({client.model})"
            elif user_input.startswith("/model "):
                options["model"] = user_input[7:].strip()
                response = f"model override set to {options['model']}"
            elif user_input == "/config":
                response = json.dumps(settings.to_dict(), indent=2)
            else:
                response = client.chat(user_input, options)
        except UniChatError as exc:
            response = f"Error: {exc}"
        print("bot>", response)


if __name__ == "__main__":
    main()
