# Copyright 2020-2024 dcmdump authors. See LICENSE file for details.
"""DICOM data dictionary subset used to name decoded elements.

Dict of {tag: (VR, VM, Name, Retired, Keyword)}, in the layout of the
DICOM Standard Part 6 data element registry.
"""

DicomDictionary = {
    0x00020000: ('UL', '1', "File Meta Information Group Length", '', 'FileMetaInformationGroupLength'),
    0x00020001: ('OB', '1', "File Meta Information Version", '', 'FileMetaInformationVersion'),
    0x00020002: ('UI', '1', "Media Storage SOP Class UID", '', 'MediaStorageSOPClassUID'),
    0x00020003: ('UI', '1', "Media Storage SOP Instance UID", '', 'MediaStorageSOPInstanceUID'),
    0x00020010: ('UI', '1', "Transfer Syntax UID", '', 'TransferSyntaxUID'),
    0x00020012: ('UI', '1', "Implementation Class UID", '', 'ImplementationClassUID'),
    0x00020013: ('SH', '1', "Implementation Version Name", '', 'ImplementationVersionName'),
    0x00020016: ('AE', '1', "Source Application Entity Title", '', 'SourceApplicationEntityTitle'),
    0x00020100: ('UI', '1', "Private Information Creator UID", '', 'PrivateInformationCreatorUID'),
    0x00020102: ('OB', '1', "Private Information", '', 'PrivateInformation'),
    0x00080005: ('CS', '1-n', "Specific Character Set", '', 'SpecificCharacterSet'),
    0x00080008: ('CS', '2-n', "Image Type", '', 'ImageType'),
    0x00080012: ('DA', '1', "Instance Creation Date", '', 'InstanceCreationDate'),
    0x00080013: ('TM', '1', "Instance Creation Time", '', 'InstanceCreationTime'),
    0x00080014: ('UI', '1', "Instance Creator UID", '', 'InstanceCreatorUID'),
    0x00080016: ('UI', '1', "SOP Class UID", '', 'SOPClassUID'),
    0x00080018: ('UI', '1', "SOP Instance UID", '', 'SOPInstanceUID'),
    0x00080020: ('DA', '1', "Study Date", '', 'StudyDate'),
    0x00080021: ('DA', '1', "Series Date", '', 'SeriesDate'),
    0x00080022: ('DA', '1', "Acquisition Date", '', 'AcquisitionDate'),
    0x00080023: ('DA', '1', "Content Date", '', 'ContentDate'),
    0x00080030: ('TM', '1', "Study Time", '', 'StudyTime'),
    0x00080031: ('TM', '1', "Series Time", '', 'SeriesTime'),
    0x00080032: ('TM', '1', "Acquisition Time", '', 'AcquisitionTime'),
    0x00080033: ('TM', '1', "Content Time", '', 'ContentTime'),
    0x00080050: ('SH', '1', "Accession Number", '', 'AccessionNumber'),
    0x00080060: ('CS', '1', "Modality", '', 'Modality'),
    0x00080064: ('CS', '1', "Conversion Type", '', 'ConversionType'),
    0x00080070: ('LO', '1', "Manufacturer", '', 'Manufacturer'),
    0x00080080: ('LO', '1', "Institution Name", '', 'InstitutionName'),
    0x00080081: ('ST', '1', "Institution Address", '', 'InstitutionAddress'),
    0x00080090: ('PN', '1', "Referring Physician's Name", '', 'ReferringPhysicianName'),
    0x00080100: ('SH', '1', "Code Value", '', 'CodeValue'),
    0x00080102: ('SH', '1', "Coding Scheme Designator", '', 'CodingSchemeDesignator'),
    0x00080104: ('LO', '1', "Code Meaning", '', 'CodeMeaning'),
    0x00081010: ('SH', '1', "Station Name", '', 'StationName'),
    0x00081030: ('LO', '1', "Study Description", '', 'StudyDescription'),
    0x0008103E: ('LO', '1', "Series Description", '', 'SeriesDescription'),
    0x00081040: ('LO', '1', "Institutional Department Name", '', 'InstitutionalDepartmentName'),
    0x00081050: ('PN', '1-n', "Performing Physician's Name", '', 'PerformingPhysicianName'),
    0x00081070: ('PN', '1-n', "Operators' Name", '', 'OperatorsName'),
    0x00081090: ('LO', '1', "Manufacturer's Model Name", '', 'ManufacturerModelName'),
    0x00081111: ('SQ', '1', "Referenced Performed Procedure Step Sequence", '', 'ReferencedPerformedProcedureStepSequence'),
    0x00081115: ('SQ', '1', "Referenced Series Sequence", '', 'ReferencedSeriesSequence'),
    0x00081140: ('SQ', '1', "Referenced Image Sequence", '', 'ReferencedImageSequence'),
    0x00081150: ('UI', '1', "Referenced SOP Class UID", '', 'ReferencedSOPClassUID'),
    0x00081155: ('UI', '1', "Referenced SOP Instance UID", '', 'ReferencedSOPInstanceUID'),
    0x00082112: ('SQ', '1', "Source Image Sequence", '', 'SourceImageSequence'),
    0x00082218: ('SQ', '1', "Anatomic Region Sequence", '', 'AnatomicRegionSequence'),
    0x00100010: ('PN', '1', "Patient's Name", '', 'PatientName'),
    0x00100020: ('LO', '1', "Patient ID", '', 'PatientID'),
    0x00100030: ('DA', '1', "Patient's Birth Date", '', 'PatientBirthDate'),
    0x00100040: ('CS', '1', "Patient's Sex", '', 'PatientSex'),
    0x00101010: ('AS', '1', "Patient's Age", '', 'PatientAge'),
    0x00101020: ('DS', '1', "Patient's Size", '', 'PatientSize'),
    0x00101030: ('DS', '1', "Patient's Weight", '', 'PatientWeight'),
    0x00180015: ('CS', '1', "Body Part Examined", '', 'BodyPartExamined'),
    0x00180050: ('DS', '1', "Slice Thickness", '', 'SliceThickness'),
    0x00180060: ('DS', '1', "KVP", '', 'KVP'),
    0x00180088: ('DS', '1', "Spacing Between Slices", '', 'SpacingBetweenSlices'),
    0x00181020: ('LO', '1-n', "Software Versions", '', 'SoftwareVersions'),
    0x00181030: ('LO', '1', "Protocol Name", '', 'ProtocolName'),
    0x00181150: ('IS', '1', "Exposure Time", '', 'ExposureTime'),
    0x00181151: ('IS', '1', "X-Ray Tube Current", '', 'XRayTubeCurrent'),
    0x00181152: ('IS', '1', "Exposure", '', 'Exposure'),
    0x00185100: ('CS', '1', "Patient Position", '', 'PatientPosition'),
    0x0020000D: ('UI', '1', "Study Instance UID", '', 'StudyInstanceUID'),
    0x0020000E: ('UI', '1', "Series Instance UID", '', 'SeriesInstanceUID'),
    0x00200010: ('SH', '1', "Study ID", '', 'StudyID'),
    0x00200011: ('IS', '1', "Series Number", '', 'SeriesNumber'),
    0x00200012: ('IS', '1', "Acquisition Number", '', 'AcquisitionNumber'),
    0x00200013: ('IS', '1', "Instance Number", '', 'InstanceNumber'),
    0x00200020: ('CS', '2', "Patient Orientation", '', 'PatientOrientation'),
    0x00200032: ('DS', '3', "Image Position (Patient)", '', 'ImagePositionPatient'),
    0x00200037: ('DS', '6', "Image Orientation (Patient)", '', 'ImageOrientationPatient'),
    0x00200052: ('UI', '1', "Frame of Reference UID", '', 'FrameOfReferenceUID'),
    0x00201040: ('LO', '1', "Position Reference Indicator", '', 'PositionReferenceIndicator'),
    0x00201041: ('DS', '1', "Slice Location", '', 'SliceLocation'),
    0x00280002: ('US', '1', "Samples per Pixel", '', 'SamplesPerPixel'),
    0x00280004: ('CS', '1', "Photometric Interpretation", '', 'PhotometricInterpretation'),
    0x00280006: ('US', '1', "Planar Configuration", '', 'PlanarConfiguration'),
    0x00280008: ('IS', '1', "Number of Frames", '', 'NumberOfFrames'),
    0x00280010: ('US', '1', "Rows", '', 'Rows'),
    0x00280011: ('US', '1', "Columns", '', 'Columns'),
    0x00280030: ('DS', '2', "Pixel Spacing", '', 'PixelSpacing'),
    0x00280100: ('US', '1', "Bits Allocated", '', 'BitsAllocated'),
    0x00280101: ('US', '1', "Bits Stored", '', 'BitsStored'),
    0x00280102: ('US', '1', "High Bit", '', 'HighBit'),
    0x00280103: ('US', '1', "Pixel Representation", '', 'PixelRepresentation'),
    0x00281050: ('DS', '1-n', "Window Center", '', 'WindowCenter'),
    0x00281051: ('DS', '1-n', "Window Width", '', 'WindowWidth'),
    0x00281052: ('DS', '1', "Rescale Intercept", '', 'RescaleIntercept'),
    0x00281053: ('DS', '1', "Rescale Slope", '', 'RescaleSlope'),
    0x00281054: ('LO', '1', "Rescale Type", '', 'RescaleType'),
    0x00321060: ('LO', '1', "Requested Procedure Description", '', 'RequestedProcedureDescription'),
    0x00400244: ('DA', '1', "Performed Procedure Step Start Date", '', 'PerformedProcedureStepStartDate'),
    0x00400245: ('TM', '1', "Performed Procedure Step Start Time", '', 'PerformedProcedureStepStartTime'),
    0x00400253: ('SH', '1', "Performed Procedure Step ID", '', 'PerformedProcedureStepID'),
    0x00400254: ('LO', '1', "Performed Procedure Step Description", '', 'PerformedProcedureStepDescription'),
    0x00400260: ('SQ', '1', "Performed Protocol Code Sequence", '', 'PerformedProtocolCodeSequence'),
    0x00540016: ('SQ', '1', "Radiopharmaceutical Information Sequence", '', 'RadiopharmaceuticalInformationSequence'),
    0x30060020: ('SQ', '1', "Structure Set ROI Sequence", '', 'StructureSetROISequence'),
    0x300A00B0: ('SQ', '1', "Beam Sequence", '', 'BeamSequence'),
    0x300A00C0: ('IS', '1', "Beam Number", '', 'BeamNumber'),
    0x300A00C2: ('LO', '1', "Beam Name", '', 'BeamName'),
    0x7FE00010: ('OB or OW', '1', "Pixel Data", '', 'PixelData'),
    0xFFFEE000: ('NONE', '1', "Item", '', 'Item'),
    0xFFFEE00D: ('NONE', '1', "Item Delimitation Item", '', 'ItemDelimitationItem'),
    0xFFFEE0DD: ('NONE', '1', "Sequence Delimitation Item", '', 'SequenceDelimitationItem'),
}
