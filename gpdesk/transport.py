import logging
from typing import Protocol

from gpdesk.pipeline import MessagePipeline
from gpdesk.schemas import InboundMessage, PipelineResult


logger = logging.getLogger(__name__)


class ReplySink(Protocol):
    def send(self, recipient: str, text: str) -> None: ...


class PrintSink:
    def send(self, recipient: str, text: str) -> None:
        print(text)


def dispatch_message(pipeline: MessagePipeline, sink: ReplySink, message: InboundMessage) -> PipelineResult:
    result = pipeline.run(message.body.strip())
    if result.reply is None:
        logger.warning("no reply generated", extra={"sender": message.sender, "outcome": result.outcome.kind})
        return result

    sink.send(message.sender, result.reply)
    logger.info("reply sent", extra={"sender": message.sender, "outcome": result.outcome.kind})
    return result
