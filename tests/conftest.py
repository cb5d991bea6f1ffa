import pytest

from inkcanvas import inkml


SAMPLE = """<?xml version="1.0"?>
<ink xmlns="http://www.w3.org/2003/InkML">
  <definitions>
    <context xml:id="ctx0">
      <inkSource xml:id="src0">
        <traceFormat xml:id="fmt0">
          <channel name="X" type="integer" max="100000" units="mm"/>
          <channel name="Y" type="integer" max="100000" units="mm"/>
          <channel name="F" type="integer" min="0" max="1024" units="dev"/>
        </traceFormat>
        <channelProperties>
          <channelProperty channel="X" name="resolution" value="100" units="1/mm"/>
          <channelProperty channel="Y" name="resolution" value="100" units="1/mm"/>
        </channelProperties>
      </inkSource>
      <timestamp xml:id="ts0" timeString="2017-01-01T00:00:00"/>
    </context>
    <brush xml:id="br0">
      <brushProperty name="color" value="#FF0000"/>
      <brushProperty name="width" value="0.5" units="mm"/>
      <brushProperty name="tip" value="ellipse"/>
    </brush>
  </definitions>
  <trace xml:id="t1" contextRef="#ctx0" brushRef="#br0">100 200 512,10 0 0,0 10 256</trace>
  <trace contextRef="#ctx0" brushRef="#br0" timeOffset="40">50 300 0</trace>
</ink>
"""


class RecordingContext:
    """Stands in for a cairo context and records every call"""

    def __init__(self):
        self.calls = []

    def __getattr__(self, name):
        def record(*args):
            self.calls.append((name,) + args)
        return record

    def named(self, name):
        return [call[1:] for call in self.calls if call[0] == name]


@pytest.fixture
def ctx():
    return RecordingContext()


@pytest.fixture
def sample_ink():
    return inkml.fromstring(SAMPLE)
