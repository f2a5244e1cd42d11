"""
    outrunnertools.report
    ~~~~~~~~~~~~~~~~~~~~~

    Creating design reports and export files



"""
import json
import logging
import os
import mako.exceptions
import mako.lookup
from .machine.sizing import KV_WARN

logger = logging.getLogger(__name__)


def fill_ratio(design):
    """returns ratio of turns per coil to max turns per coil"""
    if design.max_turns_per_coil > 0:
        return design.turns_per_coil/design.max_turns_per_coil
    return 0.0


def export_filename(design, ext='svg'):
    """returns the export file name of *design*, e.g. bldc_motor_12S14P.svg"""
    return 'bldc_motor_{}S{}P.{}'.format(
        design.slot_count, design.pole_count, ext)


def to_json(design, indent=2):
    """returns design as JSON text"""
    return json.dumps(design._asdict(), indent=indent)


class Report:
    def __init__(self, templatedirs=[]):
        dirs = list(templatedirs) + [
            os.path.join(os.path.dirname(__file__), 'templates'),
            os.path.join(os.getcwd(), '.')]
        self.lookup = mako.lookup.TemplateLookup(
            directories=dirs,
            input_encoding='utf-8')

    def render(self, design, templ='design', alternatives=[]):
        """returns report of design as list of lines

        Args:
          design: MotorDesign
          templ: name of mako template
          alternatives: (optional) list of ScoredConfiguration
        """
        try:
            template = self.lookup.get_template(templ + '.mako')
            logger.debug('use template %s.mako', templ)
        except mako.exceptions.TopLevelLookupException:
            logger.error('File %s.mako not found', templ)
            raise
        return template.render_unicode(
            design=design,
            fill_ratio=fill_ratio(design),
            kv_warning=design.kv_deviation > KV_WARN,
            alternatives=alternatives).split('\n')
