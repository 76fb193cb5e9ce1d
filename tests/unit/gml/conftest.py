"""Shared GML snippets for reader and resolver unit tests."""

import textwrap

import pytest

SQUARE = "0 0 0 10 0 0 10 10 0 0 10 0 0 0 0"
HOLE = "4 4 0 6 4 0 6 6 0 4 6 0 4 4 0"


def polygon_xml(exterior: str, interiors=(), polygon_id: str = "") -> str:
    """Build a ``gml:Polygon`` element from posList strings."""
    id_attr = f' gml:id="{polygon_id}"' if polygon_id else ""
    parts = [
        f"<gml:Polygon{id_attr}>",
        f"<gml:exterior><gml:LinearRing><gml:posList srsDimension=\"3\">{exterior}"
        "</gml:posList></gml:LinearRing></gml:exterior>",
    ]
    for ring in interiors:
        parts.append(
            f"<gml:interior><gml:LinearRing><gml:posList>{ring}"
            "</gml:posList></gml:LinearRing></gml:interior>"
        )
    parts.append("</gml:Polygon>")
    return "".join(parts)


def multi_surface_xml(*members: str, surface_id: str = "") -> str:
    """Wrap member bodies (polygon XML or ``href:<target>``) into a ``gml:MultiSurface``."""
    id_attr = f' gml:id="{surface_id}"' if surface_id else ""
    body = []
    for member in members:
        if member.startswith("href:"):
            body.append(f'<gml:surfaceMember xlink:href="{member[5:]}"/>')
        else:
            body.append(f"<gml:surfaceMember>{member}</gml:surfaceMember>")
    return f'<gml:MultiSurface{id_attr} srsName="EPSG:25832">{"".join(body)}</gml:MultiSurface>'


@pytest.fixture
def make_polygon():
    """Factory for Polygon XML, see ``polygon_xml``."""
    return polygon_xml


@pytest.fixture
def make_multi_surface():
    """Factory for MultiSurface XML, see ``multi_surface_xml``."""
    return multi_surface_xml


@pytest.fixture
def square_polygon_xml():
    return polygon_xml(SQUARE, polygon_id="PG_square")


@pytest.fixture
def multi_surface_with_id():
    """MultiSurface with an explicit gml:id and a single quadrilateral patch."""
    return textwrap.dedent("""\
        <gml:MultiSurface gml:id="UUID_6b33ecfa-6e08-4e8e-a4b5-e1d06540faf0">
          <gml:surfaceMember>
            <gml:Polygon gml:id="UUID_efb8f6a5-82fa-4b21-8709-c1d93ed1e595">
              <gml:exterior>
                <gml:LinearRing>
                  <gml:posList srsDimension="3">678009.7116291433 5403638.313338383 417.3480034550211 678012.5609078613 5403634.960884141 417.34658523466385 678013.7892528991 5403636.004867206 417.51938733855997 678010.9399743223 5403639.357321232 417.5208051908512 678009.7116291433 5403638.313338383 417.3480034550211</gml:posList>
                </gml:LinearRing>
              </gml:exterior>
            </gml:Polygon>
          </gml:surfaceMember>
        </gml:MultiSurface>
    """)


@pytest.fixture
def multi_surface_without_id():
    return textwrap.dedent("""\
        <gml:MultiSurface>
          <gml:surfaceMember>
            <gml:Polygon>
              <gml:exterior>
                <gml:LinearRing>
                  <gml:posList srsDimension="3">678009.7116291433 5403638.313338383 417.3480034550211 678012.5609078613 5403634.960884141 417.34658523466385 678013.7892528991 5403636.004867206 417.51938733855997 678010.9399743223 5403639.357321232 417.5208051908512 678009.7116291433 5403638.313338383 417.3480034550211</gml:posList>
                </gml:LinearRing>
              </gml:exterior>
            </gml:Polygon>
          </gml:surfaceMember>
        </gml:MultiSurface>
    """)


@pytest.fixture
def multi_surface_with_duplicates():
    """Wall patch whose ring repeats one vertex three times in a row."""
    return textwrap.dedent("""\
        <gml:MultiSurface srsName="EPSG:25832" srsDimension="3">
          <gml:surfaceMember>
            <gml:Polygon gml:id="4018133_PG.3nRTCd4XPu47PsAAUyNv">
              <gml:exterior>
                <gml:LinearRing gml:id="4018133_LR.lHfcvQUrKVl08ifcH6eO">
                  <gml:posList>678105.792 5403815.554 369.98523 678105.792 5403815.555 367.67323 678106.047 5403815.125 367.67323 678106.047 5403815.125 367.67323 678106.047 5403815.125 367.67323 678106.047 5403815.124 369.98523 678105.792 5403815.554 369.98523</gml:posList>
                </gml:LinearRing>
              </gml:exterior>
            </gml:Polygon>
          </gml:surfaceMember>
        </gml:MultiSurface>
    """)


@pytest.fixture
def multi_surface_with_holes():
    """Wall patch with three window openings."""
    return textwrap.dedent("""\
        <gml:MultiSurface srsName="EPSG:25832" srsDimension="3">
          <gml:surfaceMember>
            <gml:Polygon gml:id="4018106_PG.dKY9ug9ol2tsxL5bLAPz">
              <gml:exterior>
                <gml:LinearRing gml:id="4018106_LR.Wqmtl1E6Yz3eVJkuGjsK">
                  <gml:posList>678097.805 5403801.433 367.40123 678092.938 5403810.139 367.40123 678092.938 5403810.139 370.87623 678092.032 5403811.76 370.87623 678092.032 5403811.76 377.09023 678097.805 5403801.433 377.09023 678097.805 5403801.433 367.40123</gml:posList>
                </gml:LinearRing>
              </gml:exterior>
              <gml:interior>
                <gml:LinearRing gml:id="4018106_LR.10JNDsQqif3fouy54mfv">
                  <gml:posList>678096.88 5403803.088 374.90623 678097.403 5403802.152 374.90623 678097.403 5403802.152 376.19923 678096.88 5403803.088 376.19923 678096.88 5403803.088 374.90623</gml:posList>
                </gml:LinearRing>
              </gml:interior>
              <gml:interior>
                <gml:LinearRing gml:id="4018106_LR.yzLlZkAQX00eXb6Xi0DZ">
                  <gml:posList>678096.154 5403804.386 376.19923 678096.154 5403804.386 374.90623 678096.677 5403803.45 374.90623 678096.677 5403803.45 376.19923 678096.154 5403804.386 376.19923</gml:posList>
                </gml:LinearRing>
              </gml:interior>
              <gml:interior>
                <gml:LinearRing gml:id="4018106_LR.MIkI0SEPyMQ4yblCNiF2">
                  <gml:posList>678095.438 5403805.667 376.19923 678095.438 5403805.667 374.90623 678095.961 5403804.731 374.90623 678095.961 5403804.731 376.19923 678095.438 5403805.667 376.19923</gml:posList>
                </gml:LinearRing>
              </gml:interior>
            </gml:Polygon>
          </gml:surfaceMember>
        </gml:MultiSurface>
    """)
