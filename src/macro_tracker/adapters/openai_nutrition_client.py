"""OpenAI Responses API client for nutrition extraction."""

import json
from dataclasses import dataclass

from openai import AsyncOpenAI

from macro_tracker.services.extraction import NutritionExtractorClient


@dataclass
class OpenAINutritionClient(NutritionExtractorClient):
    """Nutrition extractor backed by OpenAI Responses API."""

    client: AsyncOpenAI

    @classmethod
    def create(cls, api_key: str) -> "OpenAINutritionClient":
        """Create an OpenAI nutrition client."""
        return cls(client=AsyncOpenAI(api_key=api_key))

    async def extract(  # noqa: PLR0913
        self,
        *,
        model: str,
        reasoning_effort: str | None,
        store: bool,
        instructions: str,
        description: str,
        schema: dict[str, object],
    ) -> dict[str, object]:
        """Call OpenAI Responses API with structured outputs."""
        request_payload: dict[str, object] = {
            "model": model,
            "instructions": instructions,
            "input": [
                {
                    "role": "user",
                    "content": [
                        {
                            "type": "input_text",
                            "text": f'Meal description: "{description}"',
                        }
                    ],
                }
            ],
            "text": {
                "format": {
                    "type": "json_schema",
                    "name": "nutrition_estimate",
                    "strict": True,
                    "schema": schema,
                }
            },
            "store": store,
        }
        if reasoning_effort:
            request_payload["reasoning"] = {"effort": reasoning_effort}

        response = await self.client.responses.create(**request_payload)
        output_text = response.output_text
        if not output_text:
            raise RuntimeError("OpenAI returned an empty response")
        return json.loads(output_text)

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.client.close()
